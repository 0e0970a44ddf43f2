"""
Repository for water-property anchor points (ITTC 7.5-02-01-03 tables).
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, Session, mapped_column

from .database import Base
from ..config.water_reference import ITTC_ANCHOR_POINTS
from ..models import AnchorPoint

_LOG = logging.getLogger(__name__)


class WaterPropertyORM(Base):
    __tablename__ = "water_properties"
    __table_args__ = (UniqueConstraint("medium", "temperature_c", name="uq_water_medium_temperature"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    medium: Mapped[str] = mapped_column(String(16), nullable=False, index=True)
    temperature_c: Mapped[Decimal] = mapped_column(Numeric(6, 2), nullable=False)
    salinity_psu: Mapped[Decimal] = mapped_column(Numeric(6, 2), default=Decimal("0"))
    density_kg_m3: Mapped[Decimal] = mapped_column(Numeric(10, 4), nullable=False)
    kinematic_viscosity_m2_s: Mapped[Decimal] = mapped_column(Numeric(16, 12), nullable=False)
    source_ref: Mapped[str] = mapped_column(String(255), default="")


class WaterPropertyRepository:
    """Read/write access to anchor points; satisfies the interpolator's source contract."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def fetch_anchor_points(self, medium: str) -> List[AnchorPoint]:
        """Anchor points for one medium, ascending by temperature."""
        return [
            self._to_model(obj)
            for obj in (
                self._db.query(WaterPropertyORM)
                .filter(WaterPropertyORM.medium == medium)
                .order_by(WaterPropertyORM.temperature_c)
                .all()
            )
        ]

    def fetch_all_anchor_points(self) -> List[AnchorPoint]:
        """All anchor points ordered by medium, then temperature."""
        return [
            self._to_model(obj)
            for obj in (
                self._db.query(WaterPropertyORM)
                .order_by(WaterPropertyORM.medium, WaterPropertyORM.temperature_c)
                .all()
            )
        ]

    def get(self, anchor_id: int) -> Optional[AnchorPoint]:
        obj = self._db.get(WaterPropertyORM, anchor_id)
        if not obj:
            return None
        return self._to_model(obj)

    def count(self) -> int:
        return self._db.query(WaterPropertyORM).count()

    def create(self, anchor: AnchorPoint) -> AnchorPoint:
        obj = WaterPropertyORM(
            medium=anchor.medium,
            temperature_c=anchor.temperature_c,
            salinity_psu=anchor.salinity_psu,
            density_kg_m3=anchor.density_kg_m3,
            kinematic_viscosity_m2_s=anchor.kinematic_viscosity_m2_s,
            source_ref=anchor.source_ref,
        )
        self._db.add(obj)
        self._db.commit()
        self._db.refresh(obj)
        anchor.id = obj.id
        return anchor

    def upsert(self, anchor: AnchorPoint) -> AnchorPoint:
        """Insert, or replace the values of the anchor at the same (medium, temperature)."""
        obj = self._find(anchor.medium, anchor.temperature_c)
        if obj is None:
            return self.create(anchor)
        obj.salinity_psu = anchor.salinity_psu
        obj.density_kg_m3 = anchor.density_kg_m3
        obj.kinematic_viscosity_m2_s = anchor.kinematic_viscosity_m2_s
        obj.source_ref = anchor.source_ref
        self._db.commit()
        self._db.refresh(obj)
        anchor.id = obj.id
        return anchor

    def delete(self, medium: str, temperature_c: Decimal) -> None:
        obj = self._find(medium, temperature_c)
        if obj is None:
            return
        self._db.delete(obj)
        self._db.commit()

    def seed_ittc_defaults(self) -> int:
        """Insert the ITTC reference anchors if the table is empty. Returns rows added."""
        if self.count() > 0:
            _LOG.info("Water properties already seeded, skipping")
            return 0
        for medium, temp, salinity, density, viscosity, source in ITTC_ANCHOR_POINTS:
            self._db.add(
                WaterPropertyORM(
                    medium=medium,
                    temperature_c=Decimal(temp),
                    salinity_psu=Decimal(salinity),
                    density_kg_m3=Decimal(density),
                    kinematic_viscosity_m2_s=Decimal(viscosity),
                    source_ref=source,
                )
            )
        self._db.commit()
        _LOG.info("Seeded %d water property anchor points", len(ITTC_ANCHOR_POINTS))
        return len(ITTC_ANCHOR_POINTS)

    def _find(self, medium: str, temperature_c: Decimal) -> Optional[WaterPropertyORM]:
        return (
            self._db.query(WaterPropertyORM)
            .filter(
                WaterPropertyORM.medium == medium,
                WaterPropertyORM.temperature_c == temperature_c,
            )
            .one_or_none()
        )

    @staticmethod
    def _to_model(obj: WaterPropertyORM) -> AnchorPoint:
        return AnchorPoint(
            id=obj.id,
            medium=obj.medium,
            temperature_c=obj.temperature_c,
            salinity_psu=obj.salinity_psu,
            density_kg_m3=obj.density_kg_m3,
            kinematic_viscosity_m2_s=obj.kinematic_viscosity_m2_s,
            source_ref=obj.source_ref,
        )
