"""
Quote calculator: pure math over parsed line items.

Input: material text + labor text + PricingConfiguration
Output: Quote

Order of operations:
    materials → markup → labor (total hours × rate) → subtotal
    → discount → tax on the discounted base → grand total → deposit → balance

Nothing is rounded here. Rounding is a display concern (see currency.py).
"""

import logging
from typing import Dict

from .line_item_parser import parse_labor_line_items, parse_material_line_items
from .schemas import PACKAGE_TIERS, JobDetails, PackageTier, PricingConfiguration, Quote

logger = logging.getLogger(__name__)


def calculate_quote(
    material_line_items: str,
    labor_line_items: str,
    config: PricingConfiguration,
) -> Quote:
    """
    Build a complete Quote from the two text blocks and the pricing config.

    Never raises on bad text. Empty text gives an all-zero quote.
    """
    material_items = parse_material_line_items(material_line_items)
    labor = parse_labor_line_items(labor_line_items, config.labor_rate)

    total_material_cost = sum(item.amount for item in material_items)
    markup_amount = total_material_cost * (config.material_markup_percent / 100.0)
    # Labor comes from aggregate hours, not from summing labor item amounts
    total_labor_cost = labor.total_hours * config.labor_rate

    sub_total = total_material_cost + markup_amount + total_labor_cost

    discount_amount = sub_total * (config.discount / 100.0)
    taxed_base = sub_total - discount_amount
    tax_amount = taxed_base * (config.tax / 100.0)
    grand_total = taxed_base + tax_amount
    deposit_due = grand_total * (config.deposit / 100.0)
    balance_after_deposit = grand_total - deposit_due

    logger.debug(
        f"Quote calculated: {len(material_items)} material + {len(labor.items)} labor items, "
        f"grand total {grand_total} {config.currency}"
    )

    return Quote(
        items=material_items + labor.items,
        total_material_cost=total_material_cost,
        markup_amount=markup_amount,
        total_labor_cost=total_labor_cost,
        total_hours=labor.total_hours,
        sub_total=sub_total,
        discount_amount=discount_amount,
        tax_amount=tax_amount,
        grand_total=grand_total,
        deposit_due=deposit_due,
        balance_after_deposit=balance_after_deposit,
        currency=config.currency,
        material_markup_percent=config.material_markup_percent,
        labor_rate=config.labor_rate,
        tax_percent=config.tax,
        discount_percent=config.discount,
        deposit_percent=config.deposit,
    )


def is_quotable(scope: str, material_line_items: str, labor_line_items: str) -> bool:
    """A package gets a quote only with a scope and at least one line-item block."""
    return bool(scope.strip()) and bool(
        material_line_items.strip() or labor_line_items.strip()
    )


def calculate_package_quotes(job: JobDetails) -> Dict[PackageTier, Quote]:
    """
    Quote every package tier that has something to quote, good → better → best.

    All tiers share the job's pricing configuration. Tiers without a scope
    or without any line items are left out of the result.
    """
    config = job.pricing()
    quotes = {}
    for tier in PACKAGE_TIERS:
        package = job.package(tier)
        if not is_quotable(package.scope, package.material_line_items, package.labor_line_items):
            logger.debug(f"Skipping {tier.value} package, nothing to quote")
            continue
        quotes[tier] = calculate_quote(
            package.material_line_items,
            package.labor_line_items,
            config,
        )
    return quotes
