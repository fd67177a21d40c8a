from fastapi import APIRouter, HTTPException

from ..presets.catalog import PresetNotFoundError, get_catalog
from ..schemas import JobDetails

router = APIRouter(prefix="/presets", tags=["presets"])


@router.get("/")
def list_presets():
    """All trades with their job titles, in display order."""
    return get_catalog().all_jobs()


@router.get("/{trade}")
def list_trade_jobs(trade: str):
    try:
        return get_catalog().list_jobs(trade)
    except PresetNotFoundError:
        raise HTTPException(status_code=404, detail="Trade not found")


@router.get("/{trade}/{job:path}", response_model=JobDetails)
def get_preset(trade: str, job: str):
    """Pre-filled job form for a trade/job pair. Job titles may contain '/'."""
    try:
        return get_catalog().get_preset(trade, job)
    except PresetNotFoundError:
        raise HTTPException(status_code=404, detail="Preset not found")
