from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class LocalizedText(BaseModel):
    # Values are copied from the export as-is; a missing field stays None.
    es: Any = None
    en: Any = None


class NormalizedItem(BaseModel):
    id: str
    name: LocalizedText
    description: LocalizedText
    price: Any = None
    subcategory: Any = None


class CategorySection(BaseModel):
    name: LocalizedText
    items: list[NormalizedItem] = Field(default_factory=list)


class LanguageOption(BaseModel):
    code: str
    label: str
    flag: str


class MenuConfig(BaseModel):
    currency: str
    languages: list[LanguageOption]


class MenuDocument(BaseModel):
    config: MenuConfig
    menu: dict[str, CategorySection] = Field(default_factory=dict)
