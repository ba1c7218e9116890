"""
Product Spec Comparison — Value Resolution & Numeric Extraction

Walks dotted spec paths through loosely-structured product trees and pulls
numeric magnitudes out of free-text spec values ("8 GB", "4500 mAh").
Nothing in here raises on bad product data; absence is always None.
"""
from __future__ import annotations
import math
import re
from collections.abc import Mapping, Sequence
from typing import Any, Optional, Union

from .models import ProductTree, ResolvedValue

_NUMBER_RUN = re.compile(r"[0-9.]+")
_LEADING_FLOAT = re.compile(r"[0-9]*(?:\.[0-9]*)?")


def _is_sequence(node: Any) -> bool:
    return isinstance(node, Sequence) and not isinstance(node, (str, bytes, bytearray))


def value_to_text(value: Any) -> str:
    """Render a scalar the way it reads in a spec sheet.

    Booleans become 'true'/'false', integral floats drop their '.0',
    nested lists join with ','. None and nested objects become empty text.
    """
    if value is None or isinstance(value, Mapping):
        return ""
    if _is_sequence(value):
        return ",".join(value_to_text(item) for item in value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def _step(node: Any, segment: str) -> Any:
    """Descend one level, or return None when the node can't be walked."""
    if isinstance(node, Mapping):
        return node.get(segment)
    if _is_sequence(node):
        if not (segment.isascii() and segment.isdigit()):
            return None
        digits = segment.lstrip("0") or "0"
        if len(digits) > len(str(len(node))):
            return None
        index = int(digits)
        return node[index] if index < len(node) else None
    return None


def resolve_spec_value(
    product: ProductTree,
    path: Union[str, Sequence[str]],
) -> ResolvedValue:
    """
    Resolve a dotted spec path (or pre-split segments) against one product.

    Lists at the end of the path are joined with ', '; empty strings,
    empty lists and missing branches all resolve to None.
    """
    segments = path.split(".") if isinstance(path, str) else path
    if not isinstance(product, Mapping) and not _is_sequence(product):
        return None

    node: Any = product
    for segment in segments:
        if node is None:
            return None
        node = _step(node, segment)

    if _is_sequence(node):
        if not node:
            return None
        return ", ".join(value_to_text(item) for item in node)

    if isinstance(node, bool):
        return node

    if node is None or node == "":
        return None

    if isinstance(node, (str, int, float)):
        return node

    # Nested objects are not comparable scalars
    return None


def extract_numeric(value: ResolvedValue) -> Optional[float]:
    """Extract the first numeric magnitude: '8 GB' -> 8, '48 MP' -> 48."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value

    m = _NUMBER_RUN.search(str(value))
    if not m:
        return None

    # Parse the longest valid float prefix: '1.2.3' -> 1.2, '...' -> None
    lead = _LEADING_FLOAT.match(m.group(0)).group(0)
    if not any(ch.isdigit() for ch in lead):
        return None
    return float(lead)
