"""
Basic settings and logging configuration for the navcalc engineering tool.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path


def _get_resource_root() -> Path:

    if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
        return Path(sys._MEIPASS)
    return Path(__file__).resolve().parents[2]


def _get_user_data_dir(resource_root: Path) -> Path:

    override = os.environ.get("NAVCALC_DATA_DIR")
    if override:
        return Path(override)
    if getattr(sys, "frozen", False):
        exe_path = Path(getattr(sys, "executable", resource_root))
        return exe_path.parent / "navcalc_app_data"
    return resource_root / "navcalc_app_data"


@dataclass(slots=True)
class Settings:
    """Application-level settings."""

    project_root: Path
    data_dir: Path
    db_path: Path
    default_locale: str = "en"
    default_unit_system: str = "SI"
    log_level: str = "INFO"

    @classmethod
    def default(cls) -> "Settings":
        resource_root = _get_resource_root()
        data_dir = _get_user_data_dir(resource_root)
        data_dir.mkdir(parents=True, exist_ok=True)

        return cls(
            project_root=resource_root,
            data_dir=data_dir,
            db_path=data_dir / "navcalc.db",
            default_unit_system=os.environ.get("NAVCALC_UNIT_SYSTEM", "SI"),
            log_level=os.environ.get("NAVCALC_LOG_LEVEL", "INFO").upper(),
        )


def init_logging(settings: Settings) -> None:
    """Configure basic logging to console and the data-dir log file."""
    log_file = settings.data_dir / "navcalc.log"

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )

    logging.getLogger(__name__).info("Logging initialized. DB at %s", settings.db_path)
