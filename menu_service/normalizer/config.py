from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

# Source field names as they appear in the flat menu export.
SECTION_FIELD = "SECCIÓN"
NAME_FIELD = "NOMBRE DEL PLATILLO"
DESCRIPTION_FIELD = "DESCRIPCIÓN"
PRICE_FIELD = "PRECIO"
SUBCATEGORY_FIELD = "SUBCATEGORÍA"

SECTION_LABELS: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "ENTRADAS": MappingProxyType({"es": "Entradas", "en": "Appetizers"}),
    "SOPAS": MappingProxyType({"es": "Sopas", "en": "Soups"}),
    "COCINA MEXICANA": MappingProxyType({"es": "Cocina Mexicana", "en": "Mexican Cuisine"}),
    "PIZZA": MappingProxyType({"es": "Pizza", "en": "Pizza"}),
})

SECTION_PREFIXES: Mapping[str, str] = MappingProxyType({
    "ENTRADAS": "ent",
    "SOPAS": "sop",
    "COCINA MEXICANA": "mex",
    "PIZZA": "piz",
})

FALLBACK_ID_PREFIX = "item"

DEFAULT_LANGUAGES: tuple[dict[str, str], ...] = (
    {"code": "es", "label": "Español", "flag": "mx"},
    {"code": "en", "label": "English", "flag": "us"},
)


@dataclass(frozen=True)
class NormalizerConfig:
    """
    Configuration for the menu normalization run.

    File paths can be overridden with MENU_INPUT_PATH / MENU_OUTPUT_PATH.
    """

    input_path: Path = Path(os.getenv("MENU_INPUT_PATH", _DATA_DIR / "old-menu.json"))
    output_path: Path = Path(os.getenv("MENU_OUTPUT_PATH", _DATA_DIR / "menu.json"))
    currency: str = "MXN"
    languages: tuple[dict[str, str], ...] = DEFAULT_LANGUAGES
    section_labels: Mapping[str, Mapping[str, str]] = field(
        default_factory=lambda: SECTION_LABELS
    )
    section_prefixes: Mapping[str, str] = field(default_factory=lambda: SECTION_PREFIXES)
    indent: int = 2


DEFAULT_NORMALIZER_CONFIG = NormalizerConfig()
