"""
Product Spec Comparison — Comparison Engine

Responsibilities:
  1. Difference detection across resolved spec values
  2. Best-value selection for numeric specs
  3. Table assembly, one row per catalog spec
  4. Difference filtering and category grouping
  5. Display formatting and comparison summaries
"""
from __future__ import annotations
import logging
from collections.abc import Sequence
from typing import Any, Optional

from .models import (
    CategoryGroup, CompareTableRow, ComparisonResult,
    ProductTree, ResolvedValue, SpecCatalog,
)
from .values import extract_numeric, resolve_spec_value, value_to_text

logger = logging.getLogger(__name__)


# ============================================================
# Row Analysis
# ============================================================

def is_different(values: Sequence[ResolvedValue]) -> bool:
    """True if at least one product's value differs from the others.

    All-missing counts as identical; mixed presence counts as different.
    """
    present = [v for v in values if v is not None]
    if not present:
        return False
    if len(present) != len(values):
        return True
    first = value_to_text(present[0])
    return any(value_to_text(v) != first for v in present)


def find_best_value(
    values: Sequence[ResolvedValue],
    lower_is_better: bool = False,
) -> Optional[int]:
    """
    Index of the best numeric value, or None when there's nothing to pick.

    Needs at least 2 numeric entries that are not all equal. Ties go to
    the leftmost entry.
    """
    entries: list[tuple[int, float]] = []
    for index, value in enumerate(values):
        num = extract_numeric(value)
        if num is not None:
            entries.append((index, num))

    if len(entries) < 2:
        return None

    if all(num == entries[0][1] for _, num in entries):
        return None

    best_index, best = entries[0]
    for index, num in entries:
        if (num < best) if lower_is_better else (num > best):
            best_index, best = index, num
    return best_index


# ============================================================
# Table Assembly
# ============================================================

def _display_value(value: ResolvedValue, catalog: SpecCatalog) -> Any:
    if isinstance(value, bool):
        return catalog.yes_label if value else catalog.no_label
    return value


def build_compare_table(
    products: Sequence[ProductTree],
    catalog: SpecCatalog,
) -> list[CompareTableRow]:
    """
    Build one comparison row per catalog spec, in catalog order.

    Difference and best-value analysis run on the raw resolved values;
    only the row's display values carry localized yes/no tokens.
    Missing values stay None for the rendering layer to format.
    """
    rows: list[CompareTableRow] = []

    for category in catalog.categories:
        for spec in category.specs:
            raw = [resolve_spec_value(p, spec.segments) for p in products]

            best_index = None
            if spec.is_numeric:
                best_index = find_best_value(raw, spec.lower_is_better)

            rows.append(CompareTableRow(
                category=category.name,
                attribute=spec.label,
                values=[_display_value(v, catalog) for v in raw],
                is_different=is_different(raw),
                best_index=best_index,
            ))

    return rows


def filter_different_rows(rows: Sequence[CompareTableRow]) -> list[CompareTableRow]:
    """Keep only rows whose values differ, in their original order."""
    return [row for row in rows if row.is_different]


def group_rows_by_category(
    rows: Sequence[CompareTableRow],
) -> dict[str, list[CompareTableRow]]:
    """Group rows by category; dict order follows first appearance."""
    grouped: dict[str, list[CompareTableRow]] = {}
    for row in rows:
        grouped.setdefault(row.category, []).append(row)
    return grouped


# ============================================================
# Presentation Helpers
# ============================================================

def format_spec_value(value: ResolvedValue, catalog: SpecCatalog) -> str:
    """Final text for a table cell; missing values get the catalog placeholder."""
    if value is None:
        return catalog.missing_label
    if isinstance(value, bool):
        return catalog.yes_label if value else catalog.no_label
    return value_to_text(value)


def summarize_differences(rows: Sequence[CompareTableRow], product_count: int) -> str:
    diffs = [r.attribute for r in rows if r.is_different]
    if not diffs:
        return f"Comparing {product_count} products. No differences found."
    return (
        f"Comparing {product_count} products. "
        f"They differ in {len(diffs)} specs: {', '.join(diffs[:8])}."
    )


# ============================================================
# Comparison Engine
# ============================================================

class ComparisonEngine:
    """
    Side-by-side product comparison over a fixed catalog:
      resolve → analyze → (filter) → group → summarize
    """

    def __init__(self, catalog: SpecCatalog):
        self.catalog = catalog

    def compare(
        self,
        products: Sequence[ProductTree],
        only_differences: bool = False,
    ) -> ComparisonResult:
        """Compare already-fetched product trees."""
        rows = build_compare_table(products, self.catalog)
        difference_count = sum(1 for r in rows if r.is_different)
        summary = summarize_differences(rows, len(products))

        if only_differences:
            rows = filter_different_rows(rows)

        groups = [
            CategoryGroup(name=name, rows=group)
            for name, group in group_rows_by_category(rows).items()
        ]

        logger.debug(
            f"Compared {len(products)} products against catalog "
            f"{self.catalog.version}: {difference_count} differing specs"
        )

        return ComparisonResult(
            catalog_version=self.catalog.version,
            product_names=[_product_name(p) for p in products],
            rows=rows,
            groups=groups,
            difference_count=difference_count,
            summary=summary,
        )


def _product_name(product: ProductTree) -> Optional[str]:
    name = resolve_spec_value(product, "name")
    return None if name is None else value_to_text(name)
