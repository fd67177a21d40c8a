"""
Preset catalog: trade → job → pre-filled JobDetails.

Every job title listed in job_titles.json has a preset. A handful are
hand-written in detailed.json; the rest get a generated placeholder with
basic / standard / premium packages so the form is never empty.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from ..proposal import derive_proposal_prefix
from ..schemas import JobDetails

logger = logging.getLogger(__name__)

# Directory where preset JSON files live
DATA_DIR = Path(__file__).parent / "data"

# Placeholder package tiers: (label, material lot price, labor hours, scope lines)
_PLACEHOLDER_TIERS = {
    "good": ("Basic", 600, 4, ["Basic scope for {job}", "Standard materials"]),
    "better": ("Standard", 900, 6, ["Standard scope for {job}", "Mid-grade materials", "Includes cleanup"]),
    "best": ("Premium", 1400, 8, ["Premium scope for {job}", "High-end materials", "Extended warranty"]),
}


class PresetNotFoundError(KeyError):
    """Unknown trade or job title."""


class PresetCatalog:
    """Loads preset data once and hands out JobDetails copies."""

    def __init__(self, data_dir: Path = DATA_DIR):
        self.data_dir = data_dir
        self._cache: dict[str, dict] = {}

    def _load(self, name: str) -> dict:
        """Load a preset JSON file. Cached after first load."""
        if name in self._cache:
            return self._cache[name]

        filepath = self.data_dir / f"{name}.json"
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)

        self._cache[name] = data
        return data

    def list_trades(self) -> list[str]:
        return list(self._load("job_titles").keys())

    def list_jobs(self, trade: str) -> list[str]:
        job_titles = self._load("job_titles")
        if trade not in job_titles:
            raise PresetNotFoundError(f"Unknown trade: {trade}. Available: {list(job_titles.keys())}")
        return list(job_titles[trade])

    def get_preset(self, trade: str, job: str) -> JobDetails:
        """Return the preset for a job: detailed if one exists, otherwise a placeholder."""
        if job not in self.list_jobs(trade):
            raise PresetNotFoundError(f"Unknown job for {trade}: {job}")

        detailed = self._load("detailed").get(trade, {}).get(job)
        if detailed is not None:
            return JobDetails(**detailed)

        logger.debug(f"No detailed preset for {trade} / {job}, using placeholder")
        return self._placeholder(trade, job)

    def _placeholder(self, trade: str, job: str) -> JobDetails:
        defaults = self._load("trade_defaults").get(trade, {})
        brand = defaults.get("brand", "")

        packages = {}
        for tier, (label, material_price, hours, scope_lines) in _PLACEHOLDER_TIERS.items():
            packages[tier] = {
                "scope": "\n".join(f"- {line.format(job=job)}" for line in scope_lines),
                "material_line_items": f"{job} Materials ({label}) | 1 | lot | {material_price}",
                "labor_line_items": f"{job} Labor ({label}) | {hours} | hrs",
            }

        return JobDetails(
            site_address="123 Example St, City, ST",
            client_type="Homeowner",
            summary=(
                f"Standard project to perform: {job}. "
                f"Includes all necessary materials and labor for a complete installation."
            ),
            packages=packages,
            material_markup_percent=25,
            labor_rate=95,
            constraints="Standard work hours (9am-5pm). Client to provide clear access to the work area.",
            warranty=12,
            validity=30,
            tax=5,
            discount=0,
            deposit=40,
            currency="CAD",
            timeline="1-3 days",
            brand=brand,
            license=defaults.get("license", ""),
            proposal_number_prefix=derive_proposal_prefix(brand),
            attachments=[],
            primary_color="#00D58C",
            secondary_color="#F59E0B",
        )

    def all_jobs(self) -> dict[str, list[str]]:
        return {trade: self.list_jobs(trade) for trade in self.list_trades()}


_catalog: Optional[PresetCatalog] = None


def get_catalog() -> PresetCatalog:
    """Shared catalog instance."""
    global _catalog
    if _catalog is None:
        _catalog = PresetCatalog()
    return _catalog
