"""Captured records (in memory, oldest first)."""
from fastapi import APIRouter, Depends

from pairscan.api.state import AppState, get_state
from pairscan.models.scan import Record

router = APIRouter()


def _record_to_dict(r: Record) -> dict:
    return {
        "o1": r.primary_code,
        "l1": r.secondary_code,
        "s1": r.sequence,
    }


@router.get("/")
async def list_records(state: AppState = Depends(get_state)):
    """List all captured records."""
    return [_record_to_dict(r) for r in state.workflow.records]
