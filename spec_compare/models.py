"""
Product Spec Comparison — Core Pydantic Models
"""
from __future__ import annotations
from typing import Any, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

# A product tree is any JSON-like value; nothing else is assumed about it.
ProductTree = Any

# None means "absent", never an error.
ResolvedValue = Union[bool, int, float, str, None]

# ============================================================
# Catalog Models
# ============================================================

class SpecDefinition(BaseModel):
    """One comparable field: its dotted path, label and comparison semantics."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    key: str
    label: str
    is_numeric: bool = Field(default=False, alias="isNumeric")
    lower_is_better: bool = Field(default=False, alias="lowerIsBetter")

    _segments: tuple[str, ...] = PrivateAttr(default=())

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        if not v or any(not seg for seg in v.split(".")):
            raise ValueError(f"spec key must be a dotted path, got {v!r}")
        return v

    def model_post_init(self, __context: Any) -> None:
        self._segments = tuple(self.key.split("."))

    @property
    def segments(self) -> tuple[str, ...]:
        return self._segments


class SpecCategory(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    specs: tuple[SpecDefinition, ...] = ()


class SpecCatalog(BaseModel):
    """Ordered, read-only registry of comparable spec categories."""
    model_config = ConfigDict(frozen=True)

    version: str = "1"
    categories: tuple[SpecCategory, ...] = ()

    # Localized display tokens
    yes_label: str = "Có"
    no_label: str = "Không"
    missing_label: str = "-"

    def all_keys(self) -> list[str]:
        return [spec.key for category in self.categories for spec in category.specs]

    def find_by_key(self, key: str) -> Optional[SpecDefinition]:
        for category in self.categories:
            for spec in category.specs:
                if spec.key == key:
                    return spec
        return None

    def category_names(self) -> list[str]:
        return [category.name for category in self.categories]

# ============================================================
# Comparison Output Models
# ============================================================

class CompareTableRow(BaseModel):
    category: str
    attribute: str
    values: list[Union[str, int, float, None]]
    is_different: bool
    best_index: Optional[int] = None


class CategoryGroup(BaseModel):
    name: str
    rows: list[CompareTableRow]


class ComparisonResult(BaseModel):
    catalog_version: str
    product_names: list[Optional[str]]
    rows: list[CompareTableRow]
    groups: list[CategoryGroup] = Field(default_factory=list)
    difference_count: int = 0
    summary: Optional[str] = None
