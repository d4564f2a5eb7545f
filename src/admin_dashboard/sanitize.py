"""Turn raw contest entries and submission counts into display-safe values.

Nothing in here raises for a bad individual entry: unusable labels fall back to
``"Contest {n}"`` and unusable counts become ``0``, with a log line either way.
Only a length mismatch between the two sequences is treated as a hard failure.
"""

from __future__ import annotations

import enum
import logging
import math
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

from admin_dashboard.errors import DataShapeMismatch
from admin_dashboard.models import ChartModel, Count

logger = logging.getLogger(__name__)

# Keys that mark a serialized UI element rather than contest data.
UI_ELEMENT_MARKERS = frozenset({"$$typeof", "_owner", "_store"})


class LabelKind(enum.Enum):
    MISSING = "missing"
    FOREIGN = "foreign"
    NAMED = "named"
    PRIMITIVE = "primitive"


def positional_label(index: int) -> str:
    return f"Contest {index + 1}"


def classify_label(raw: Any) -> LabelKind:
    """Sort a raw contest entry into one of the recognized label shapes."""
    if raw is None:
        return LabelKind.MISSING
    if isinstance(raw, bool):
        return LabelKind.PRIMITIVE if raw else LabelKind.MISSING
    if isinstance(raw, Mapping):
        if UI_ELEMENT_MARKERS.intersection(k for k in raw.keys() if isinstance(k, str)):
            return LabelKind.FOREIGN
        return LabelKind.NAMED
    if isinstance(raw, (str, int, float, Decimal)):
        if not raw or (isinstance(raw, float) and math.isnan(raw)):
            return LabelKind.MISSING
        return LabelKind.PRIMITIVE
    return LabelKind.FOREIGN


def _primitive_text(raw: str | int | float | Decimal) -> str:
    if isinstance(raw, bool):
        return "true"
    if isinstance(raw, float) and raw.is_integer():
        return str(int(raw))
    return str(raw)


def sanitize_label(raw: Any, index: int) -> str:
    fallback = positional_label(index)
    try:
        kind = classify_label(raw)
        if kind is LabelKind.NAMED:
            name = raw.get("name")
            text = "" if name is None else str(name).strip()
        elif kind is LabelKind.PRIMITIVE:
            text = _primitive_text(raw).strip()
        else:
            logger.debug("%s: %s entry replaced by positional label", fallback, kind.value)
            return fallback
    except Exception as err:
        logger.error("%s formatting error: %s", fallback, err)
        return fallback
    return text or fallback


def _to_number(raw: Any) -> float | int:
    if isinstance(raw, bool):
        return int(raw)
    if raw is None:
        return 0
    if isinstance(raw, (int, float)):
        return raw
    if isinstance(raw, Decimal):
        return float(raw)
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return 0
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


def _is_finite(value: float | int) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def coerce_count(raw: Any) -> Count | None:
    """Return raw as a finite non-negative number, or None when it is not one."""
    try:
        value = _to_number(raw)
    except Exception:
        return None
    if not _is_finite(value) or value < 0:
        return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def validate_count(raw: Any, index: int) -> Count:
    value = coerce_count(raw)
    if value is None:
        logger.warning("Invalid count at index %d: %r", index, raw)
        return 0
    return value


def sanitize_labels(raw_contests: Sequence[Any]) -> list[str]:
    return [sanitize_label(raw, index) for index, raw in enumerate(raw_contests)]


def validate_counts(raw_counts: Sequence[Any]) -> list[Count]:
    return [validate_count(raw, index) for index, raw in enumerate(raw_counts)]


def reconcile(labels: Sequence[str], counts: Sequence[Count]) -> ChartModel:
    """Pair labels with counts, refusing to truncate or pad when the lengths differ."""
    if len(labels) != len(counts):
        logger.error("Data mismatch! Contests: %d Counts: %d", len(labels), len(counts))
        raise DataShapeMismatch(len(labels), len(counts))
    return ChartModel(categories=tuple(labels), series=tuple(counts))
