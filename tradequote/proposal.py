"""
Proposal helpers: numbering and upsell lines.
"""

from datetime import datetime, timezone
from typing import Optional

UPSELL_LINE_TEMPLATE = "{name} | 1 | ea | 0"


def format_proposal_number(prefix: str, counter: int, year: Optional[int] = None) -> str:
    """TPS + 7 in 2026 -> TPS-2026-0007"""
    year = year or datetime.now(timezone.utc).year
    return f"{prefix}-{year}-{str(counter).zfill(4)}"


def derive_proposal_prefix(brand: str) -> str:
    """First three letters of the brand, upper-cased: 'PureFlow Plumbing' -> 'PUR'."""
    return brand[:3].upper()


def append_upsell_line(material_line_items: str, name: str) -> str:
    """
    Add an upsell as a new material line with a placeholder cost of 0.
    The contractor fills in the real rate afterwards.
    """
    line = UPSELL_LINE_TEMPLATE.format(name=name.strip())
    if not material_line_items:
        return line
    return f"{material_line_items}\n{line}"
