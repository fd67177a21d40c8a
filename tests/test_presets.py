"""
Preset catalog and proposal helper tests.

Tests:
1-3.   Catalog listing (trades, jobs, unknown trade)
4-6.   Detailed presets (panel upgrade, plumbing discount, tier quotes)
7-9.   Placeholder presets (packages, branding, quote math)
10.    Custom data directory
11-14. Proposal numbers, prefixes, upsell lines
"""

import json
from datetime import datetime, timezone

import pytest

from tradequote.presets.catalog import PresetCatalog, PresetNotFoundError, get_catalog
from tradequote.proposal import append_upsell_line, derive_proposal_prefix, format_proposal_number
from tradequote.quote_calculator import calculate_package_quotes, calculate_quote
from tradequote.schemas import PackageTier


# ============================================================
# 1-3. Catalog listing
# ============================================================

def test_trades_in_display_order():
    assert get_catalog().list_trades() == ["Electrical", "Renovation", "Plumbing", "HVAC"]


def test_every_trade_has_fifteen_jobs():
    catalog = get_catalog()
    for trade, jobs in catalog.all_jobs().items():
        assert len(jobs) == 15, trade
    assert catalog.list_jobs("Electrical")[0] == "Panel Upgrade (200A)"


def test_unknown_trade_and_job():
    catalog = get_catalog()
    with pytest.raises(PresetNotFoundError):
        catalog.list_jobs("Roofing")
    with pytest.raises(PresetNotFoundError):
        catalog.get_preset("Electrical", "Build a Rocket")
    # Catalog misses are KeyErrors to callers that don't know the subclass
    with pytest.raises(KeyError):
        catalog.get_preset("Roofing", "Anything")


# ============================================================
# 4-6. Detailed presets
# ============================================================

def test_detailed_panel_upgrade_preset():
    job = get_catalog().get_preset("Electrical", "Panel Upgrade (200A)")
    assert job.brand == "TrueCan Power Systems"
    assert job.proposal_number_prefix == "TPS"
    assert job.material_markup_percent == 30
    assert job.labor_rate == 110
    assert job.attachments == ["photo_of_old_panel.jpg", "site_access_notes.pdf"]
    assert "200A Panel Kit | 1 | kit | 550" in job.package(PackageTier.BETTER).material_line_items


def test_detailed_plumbing_preset_with_unicode_title():
    job = get_catalog().get_preset("Plumbing", "Hot Water Tank Replacement (40–50 gal)")
    assert job.discount == 5
    assert job.tax == 12
    assert job.pricing().deposit == 50


def test_panel_upgrade_better_tier_quote():
    job = get_catalog().get_preset("Electrical", "Panel Upgrade (200A)")
    quotes = calculate_package_quotes(job)
    assert list(quotes.keys()) == [PackageTier.GOOD, PackageTier.BETTER, PackageTier.BEST]

    better = quotes[PackageTier.BETTER]
    # 550 + 4 × 65 = 810 materials, +30% markup, 8h × 110 labor
    assert better.total_material_cost == pytest.approx(810)
    assert better.markup_amount == pytest.approx(243)
    assert better.total_labor_cost == pytest.approx(880)
    assert better.grand_total == pytest.approx(2029.65)
    assert better.deposit_due == pytest.approx(811.86)


# ============================================================
# 7-9. Placeholder presets
# ============================================================

def test_placeholder_packages():
    job = get_catalog().get_preset("HVAC", "Thermostat Upgrade (Smart)")
    good = job.package(PackageTier.GOOD)
    assert good.material_line_items == "Thermostat Upgrade (Smart) Materials (Basic) | 1 | lot | 600"
    assert good.labor_line_items == "Thermostat Upgrade (Smart) Labor (Basic) | 4 | hrs"
    assert good.scope.startswith("- Basic scope for Thermostat Upgrade (Smart)")
    assert "Extended warranty" in job.package(PackageTier.BEST).scope


def test_placeholder_branding():
    job = get_catalog().get_preset("HVAC", "Thermostat Upgrade (Smart)")
    assert job.brand == "ComfortZone HVAC"
    assert job.license == "HV-67890"
    assert job.proposal_number_prefix == "COM"
    assert job.currency == "CAD"


def test_placeholder_quote_math():
    job = get_catalog().get_preset("Renovation", "Deck Build or Re-Decking")
    good = job.package(PackageTier.GOOD)
    quote = calculate_quote(good.material_line_items, good.labor_line_items, job.pricing())
    # 600 + 25% markup + 4h × 95 = 1130, +5% tax
    assert quote.sub_total == pytest.approx(1130)
    assert quote.grand_total == pytest.approx(1186.5)


# ============================================================
# 10. Custom data directory
# ============================================================

def test_catalog_reads_from_data_dir(tmp_path):
    (tmp_path / "job_titles.json").write_text(json.dumps({"Roofing": ["Shingle Repair"]}))
    (tmp_path / "trade_defaults.json").write_text(json.dumps({
        "Roofing": {"brand": "TopCover Roofing", "license": "RF-1"},
    }))
    (tmp_path / "detailed.json").write_text("{}")

    catalog = PresetCatalog(data_dir=tmp_path)
    assert catalog.list_trades() == ["Roofing"]
    job = catalog.get_preset("Roofing", "Shingle Repair")
    assert job.proposal_number_prefix == "TOP"


# ============================================================
# 11-14. Proposal helpers
# ============================================================

def test_proposal_number_format():
    assert format_proposal_number("TPS", 7, year=2026) == "TPS-2026-0007"
    assert format_proposal_number("FMP", 12345, year=2026) == "FMP-2026-12345"


def test_proposal_number_defaults_to_current_year():
    number = format_proposal_number("CRE", 1)
    prefix, year, counter = number.split("-")
    assert prefix == "CRE"
    assert int(year) == datetime.now(timezone.utc).year
    assert counter == "0001"


def test_derive_prefix():
    assert derive_proposal_prefix("PureFlow Plumbing") == "PUR"
    assert derive_proposal_prefix("ab") == "AB"


def test_append_upsell_line():
    text = append_upsell_line("Panel | 1 | kit | 550", "Whole-Home Surge Protector")
    assert text == "Panel | 1 | kit | 550\nWhole-Home Surge Protector | 1 | ea | 0"
    assert append_upsell_line("", "Smart Thermostat") == "Smart Thermostat | 1 | ea | 0"

    # The appended line parses into a zero-cost material item
    quote = calculate_quote(text, "", get_catalog().get_preset("Electrical", "Panel Upgrade (200A)").pricing())
    assert quote.items[-1].description == "Whole-Home Surge Protector"
    assert quote.items[-1].amount == 0
