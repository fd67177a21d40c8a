"""
Line item parser: turns the pipe-delimited text areas into LineItems.

Materials:  description | quantity | unit | rate
Labor:      description | hours

Lenient by design. A line with no description is dropped, a missing or
non-numeric field falls back to its default, and nothing here ever raises.
Currency symbols and thousands separators are NOT stripped: "$100" is not a
number and falls back like any other junk.
"""

import math
import re
from typing import List, NamedTuple, Optional

from .schemas import LineItem, LineItemKind

FIELD_SEPARATOR = "|"

DEFAULT_QUANTITY = 1.0
DEFAULT_MATERIAL_UNIT = "ea"
DEFAULT_RATE = 0.0
LABOR_UNIT = "hr"

# Plain decimal literal: sign, digits, optional fraction, optional exponent.
# No "$", no "1,000", no "1_000", no "nan"/"inf".
_NUMBER_PATTERN = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")


class LaborLineItems(NamedTuple):
    items: List[LineItem]
    total_hours: float


def parse_number(value: Optional[str], default: float) -> float:
    """Parse a trimmed numeric field, or return default when absent or unparseable."""
    if value is None:
        return default
    text = value.strip()
    if not text or not _NUMBER_PATTERN.match(text):
        return default
    number = float(text)
    if not math.isfinite(number):
        return default
    return number


def _split_fields(line: str) -> List[str]:
    return [field.strip() for field in line.split(FIELD_SEPARATOR)]


def _field(fields: List[str], index: int) -> Optional[str]:
    return fields[index] if index < len(fields) else None


def parse_material_line_items(text: str) -> List[LineItem]:
    """
    Parse material lines in source order.

    "Panel | 1 | kit | 550" -> Panel, 1 kit @ 550
    "Widget"                -> Widget, 1 ea @ 0
    """
    items = []
    for line in (text or "").split("\n"):
        fields = _split_fields(line)
        description = fields[0]
        if not description:
            continue
        items.append(LineItem(
            description=description,
            quantity=parse_number(_field(fields, 1), DEFAULT_QUANTITY),
            unit=_field(fields, 2) or DEFAULT_MATERIAL_UNIT,
            rate=parse_number(_field(fields, 3), DEFAULT_RATE),
            kind=LineItemKind.MATERIAL,
        ))
    return items


def parse_labor_line_items(text: str, labor_rate: float) -> LaborLineItems:
    """
    Parse labor lines in source order.

    Every line is billed in hours at the single configured labor_rate;
    anything after the hours field is ignored. total_hours is summed here
    as lines are read, not derived from item amounts afterwards.
    """
    items = []
    total_hours = 0.0
    for line in (text or "").split("\n"):
        fields = _split_fields(line)
        description = fields[0]
        if not description:
            continue
        hours = parse_number(_field(fields, 1), DEFAULT_QUANTITY)
        total_hours += hours
        items.append(LineItem(
            description=description,
            quantity=hours,
            unit=LABOR_UNIT,
            rate=labor_rate,
            kind=LineItemKind.LABOR,
        ))
    return LaborLineItems(items=items, total_hours=total_hours)
