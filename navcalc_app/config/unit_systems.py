"""
Canonical unit-system definition shared by every conversion engine.

Both the server-side calculation tier and the client application render
their tables from this data, so edits here are edits to the contract:
re-run the conformance vectors (services.conformance) after any change.

Cross-system factors use the exact international definitions
(1 ft = 0.3048 m, 1 lb = 0.45359237 kg, 1959 yard and pound agreement).
Only one direction of each pair is listed; the registry derives the
inverse in Decimal arithmetic.
"""

from __future__ import annotations

# --- Locales ---
DEFAULT_LOCALE = "en"
SUPPORTED_LOCALES = ("en", "es")

# Number rendering per locale (no grouping separators are ever emitted)
LOCALE_DECIMAL_SEPARATORS = {
    "en": ".",
    "es": ",",
}

# --- Categories (closed set for this domain) ---
CATEGORY_IDS = ("Length", "Mass", "Area", "Volume", "Density", "MomentOfInertia")

CATEGORY_NAMES = {
    "Length": {"en": "Length", "es": "Longitud"},
    "Mass": {"en": "Mass", "es": "Masa"},
    "Area": {"en": "Area", "es": "Área"},
    "Volume": {"en": "Volume", "es": "Volumen"},
    "Density": {"en": "Density", "es": "Densidad"},
    "MomentOfInertia": {"en": "Moment of Inertia", "es": "Momento de Inercia"},
}

# --- Unit systems ---
# Each category lists its units in display order; the first entry is the
# base unit of that (system, category) pair. Non-base units carry a factor
# to the base unit of the same system.
UNIT_SYSTEMS = [
    {
        "id": "SI",
        "is_default": True,
        "names": {"en": "SI (Metric)", "es": "SI (Métrico)"},
        "descriptions": {
            "en": "International System of Units",
            "es": "Sistema Internacional de Unidades",
        },
        "categories": {
            "Length": [
                {
                    "id": "meter",
                    "symbol": "m",
                    "is_base": True,
                    "names": {"en": "Meter", "es": "Metro"},
                    "plural_names": {"en": "Meters", "es": "Metros"},
                },
                {
                    "id": "millimeter",
                    "symbol": "mm",
                    "names": {"en": "Millimeter", "es": "Milímetro"},
                    "plural_names": {"en": "Millimeters", "es": "Milímetros"},
                    "conversion_factor": "0.001",
                    "base_unit": "meter",
                },
            ],
            "Mass": [
                {
                    "id": "kilogram",
                    "symbol": "kg",
                    "is_base": True,
                    "names": {"en": "Kilogram", "es": "Kilogramo"},
                    "plural_names": {"en": "Kilograms", "es": "Kilogramos"},
                },
                {
                    "id": "tonne",
                    "symbol": "t",
                    "names": {"en": "Tonne", "es": "Tonelada"},
                    "plural_names": {"en": "Tonnes", "es": "Toneladas"},
                    "conversion_factor": "1000",
                    "base_unit": "kilogram",
                },
            ],
            "Area": [
                {
                    "id": "square-meter",
                    "symbol": "m²",
                    "is_base": True,
                    "names": {"en": "Square Meter", "es": "Metro Cuadrado"},
                    "plural_names": {"en": "Square Meters", "es": "Metros Cuadrados"},
                },
            ],
            "Volume": [
                {
                    "id": "cubic-meter",
                    "symbol": "m³",
                    "is_base": True,
                    "names": {"en": "Cubic Meter", "es": "Metro Cúbico"},
                    "plural_names": {"en": "Cubic Meters", "es": "Metros Cúbicos"},
                },
            ],
            "Density": [
                {
                    "id": "kg-per-cubic-meter",
                    "symbol": "kg/m³",
                    "is_base": True,
                    "names": {
                        "en": "Kilogram per Cubic Meter",
                        "es": "Kilogramo por Metro Cúbico",
                    },
                    "plural_names": {
                        "en": "Kilograms per Cubic Meter",
                        "es": "Kilogramos por Metro Cúbico",
                    },
                },
            ],
            "MomentOfInertia": [
                {
                    "id": "meter-to-fourth",
                    "symbol": "m⁴",
                    "is_base": True,
                    "names": {
                        "en": "Meter to the Fourth Power",
                        "es": "Metro a la Cuarta Potencia",
                    },
                    "plural_names": {
                        "en": "Meters to the Fourth Power",
                        "es": "Metros a la Cuarta Potencia",
                    },
                },
            ],
        },
    },
    {
        "id": "Imperial",
        "is_default": False,
        "names": {"en": "Imperial (US)", "es": "Imperial (EE.UU.)"},
        "descriptions": {
            "en": "United States customary units",
            "es": "Unidades consuetudinarias de Estados Unidos",
        },
        "categories": {
            "Length": [
                {
                    "id": "foot",
                    "symbol": "ft",
                    "is_base": True,
                    "names": {"en": "Foot", "es": "Pie"},
                    "plural_names": {"en": "Feet", "es": "Pies"},
                },
                {
                    "id": "inch",
                    "symbol": "in",
                    "names": {"en": "Inch", "es": "Pulgada"},
                    "plural_names": {"en": "Inches", "es": "Pulgadas"},
                    "conversion_factor": ("1", "12"),
                    "base_unit": "foot",
                },
            ],
            "Mass": [
                {
                    "id": "pound",
                    "symbol": "lb",
                    "is_base": True,
                    "names": {"en": "Pound", "es": "Libra"},
                    "plural_names": {"en": "Pounds", "es": "Libras"},
                },
                {
                    "id": "long-ton",
                    "symbol": "LT",
                    "names": {"en": "Long Ton", "es": "Tonelada Larga"},
                    "plural_names": {"en": "Long Tons", "es": "Toneladas Largas"},
                    "conversion_factor": "2240",
                    "base_unit": "pound",
                },
            ],
            "Area": [
                {
                    "id": "square-foot",
                    "symbol": "ft²",
                    "is_base": True,
                    "names": {"en": "Square Foot", "es": "Pie Cuadrado"},
                    "plural_names": {"en": "Square Feet", "es": "Pies Cuadrados"},
                },
            ],
            "Volume": [
                {
                    "id": "cubic-foot",
                    "symbol": "ft³",
                    "is_base": True,
                    "names": {"en": "Cubic Foot", "es": "Pie Cúbico"},
                    "plural_names": {"en": "Cubic Feet", "es": "Pies Cúbicos"},
                },
            ],
            "Density": [
                {
                    "id": "lb-per-cubic-foot",
                    "symbol": "lb/ft³",
                    "is_base": True,
                    "names": {"en": "Pound per Cubic Foot", "es": "Libra por Pie Cúbico"},
                    "plural_names": {
                        "en": "Pounds per Cubic Foot",
                        "es": "Libras por Pie Cúbico",
                    },
                },
            ],
            "MomentOfInertia": [
                {
                    "id": "foot-to-fourth",
                    "symbol": "ft⁴",
                    "is_base": True,
                    "names": {
                        "en": "Foot to the Fourth Power",
                        "es": "Pie a la Cuarta Potencia",
                    },
                    "plural_names": {
                        "en": "Feet to the Fourth Power",
                        "es": "Pies a la Cuarta Potencia",
                    },
                },
            ],
        },
    },
]

# --- Cross-system factors between base units ---
# (from_unit, to_unit, factor); factor is a decimal string or a
# (numerator, denominator) pair of decimal strings.
CONVERSION_FACTORS = [
    ("foot", "meter", "0.3048"),
    ("pound", "kilogram", "0.45359237"),
    ("square-foot", "square-meter", "0.09290304"),
    ("cubic-foot", "cubic-meter", "0.028316846592"),
    ("lb-per-cubic-foot", "kg-per-cubic-meter", ("0.45359237", "0.028316846592")),
    ("foot-to-fourth", "meter-to-fourth", "0.0086309748412416"),
]

# Relative tolerance for the forward * inverse == 1 check at registry build
FACTOR_SYMMETRY_TOLERANCE = 1e-9
