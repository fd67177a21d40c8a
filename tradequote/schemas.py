import enum
from typing import Dict, List

from pydantic import BaseModel, computed_field

from .config import settings


class LineItemKind(str, enum.Enum):
    MATERIAL = "material"
    LABOR = "labor"


class PackageTier(str, enum.Enum):
    GOOD = "good"
    BETTER = "better"
    BEST = "best"


# Display and calculation order for tiers
PACKAGE_TIERS = [PackageTier.GOOD, PackageTier.BETTER, PackageTier.BEST]


class LineItem(BaseModel):
    """One priced row. amount is always quantity × rate, never stored."""
    description: str
    quantity: float = 1.0
    unit: str = "ea"
    rate: float = 0.0
    kind: LineItemKind = LineItemKind.MATERIAL

    @computed_field
    @property
    def amount(self) -> float:
        return self.quantity * self.rate

    class Config:
        frozen = True


class PricingConfiguration(BaseModel):
    # Percentages are on the 0-100 scale. Negative values pass through untouched.
    material_markup_percent: float = settings.DEFAULT_MATERIAL_MARKUP_PCT
    labor_rate: float = settings.DEFAULT_LABOR_RATE
    tax: float = settings.DEFAULT_TAX_PCT
    discount: float = settings.DEFAULT_DISCOUNT_PCT
    deposit: float = settings.DEFAULT_DEPOSIT_PCT
    currency: str = settings.DEFAULT_CURRENCY


class Quote(BaseModel):
    items: List[LineItem] = []
    total_material_cost: float = 0.0
    markup_amount: float = 0.0
    total_labor_cost: float = 0.0
    total_hours: float = 0.0
    sub_total: float = 0.0
    discount_amount: float = 0.0
    tax_amount: float = 0.0
    grand_total: float = 0.0
    deposit_due: float = 0.0
    balance_after_deposit: float = 0.0

    # Echoed configuration, for display without the original config
    currency: str
    material_markup_percent: float
    labor_rate: float
    tax_percent: float
    discount_percent: float
    deposit_percent: float

    class Config:
        frozen = True


class PackageDetails(BaseModel):
    scope: str = ""
    material_line_items: str = ""
    labor_line_items: str = ""


class JobDetails(PricingConfiguration):
    """
    The full job form: site and client info, the three package tiers,
    the shared pricing fields, and proposal branding.
    """
    site_address: str = ""
    client_type: str = ""
    summary: str = ""
    packages: Dict[PackageTier, PackageDetails] = {}
    constraints: str = ""
    warranty: int = 12          # months
    validity: int = 30          # days
    timeline: str = ""
    brand: str = ""
    license: str = ""
    proposal_number_prefix: str = ""
    attachments: List[str] = []
    primary_color: str = "#00D58C"
    secondary_color: str = "#F59E0B"

    def package(self, tier: PackageTier) -> PackageDetails:
        return self.packages.get(tier) or PackageDetails()

    def pricing(self) -> PricingConfiguration:
        """The non-package pricing fields, as a plain PricingConfiguration."""
        fields = PricingConfiguration.model_fields.keys()
        return PricingConfiguration(**self.model_dump(include=set(fields)))
