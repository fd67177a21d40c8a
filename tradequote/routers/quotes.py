"""
Quote endpoints: the calculator, the formatter and the proposal helpers.

Line-item text is never validated here. Whatever the user typed goes
straight to the parser, which coerces instead of failing.
"""

from typing import Dict, Optional

from fastapi import APIRouter
from pydantic import BaseModel

from ..currency import format_currency
from ..proposal import append_upsell_line, format_proposal_number
from ..quote_calculator import calculate_package_quotes, calculate_quote
from ..schemas import JobDetails, PackageTier, PricingConfiguration, Quote

router = APIRouter(prefix="/quotes", tags=["quotes"])


# --- Schemas ---
class CalculateRequest(BaseModel):
    material_line_items: str = ""
    labor_line_items: str = ""
    config: PricingConfiguration = PricingConfiguration()


class FormatRequest(BaseModel):
    amount: float
    currency: str
    locale: Optional[str] = None


class UpsellRequest(BaseModel):
    material_line_items: str = ""
    name: str


@router.post("/calculate", response_model=Quote)
def calculate(request: CalculateRequest):
    """Calculate one quote from raw material/labor text."""
    return calculate_quote(
        request.material_line_items,
        request.labor_line_items,
        request.config,
    )


@router.post("/packages", response_model=Dict[PackageTier, Quote])
def calculate_packages(job: JobDetails):
    """Quote every package tier that has a scope and line items."""
    return calculate_package_quotes(job)


@router.post("/format")
def format_amount(request: FormatRequest):
    return {"formatted": format_currency(request.amount, request.currency, request.locale)}


@router.post("/upsell")
def add_upsell(request: UpsellRequest):
    """Append an upsell as a zero-cost material line for the user to price."""
    return {
        "material_line_items": append_upsell_line(request.material_line_items, request.name),
    }


@router.get("/proposal-number")
def proposal_number(prefix: str, counter: int, year: Optional[int] = None):
    return {"proposal_number": format_proposal_number(prefix, counter, year)}
