"""Capture workflow: current step, scan input, cancel and undo.

Routes are async so they run on the event loop, the only thread allowed to
touch the workflow.
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from pairscan.api.state import AppState, get_state
from pairscan.core.workflow import CaptureWorkflow
from pairscan.models.scan import ScanEvent, Symbology

router = APIRouter()


class ScanBody(BaseModel):
    value: str
    symbology: str


def capture_view(workflow: CaptureWorkflow) -> dict:
    pending = workflow.pending_primary_code
    return {
        "step": workflow.state.name,
        "title": workflow.state.title,
        "pending_o1": pending,
        "captured_label": f"Captured o1: {pending}" if pending is not None else None,
        "record_count": workflow.record_count,
        "message": workflow.status_text,
        "can_undo": workflow.can_undo,
        "can_export": workflow.record_count > 0,
    }


@router.get("")
async def get_capture(state: AppState = Depends(get_state)):
    """Return current step, captured o1, row count and live status message."""
    return capture_view(state.workflow)


@router.post("/scan")
async def scan(body: ScanBody, state: AppState = Depends(get_state)):
    """Feed one decoded read (e.g. from a handheld scanner in keyboard mode)."""
    event = ScanEvent(value=body.value, symbology=Symbology.parse(body.symbology))
    outcome = state.workflow.handle_scan(event)
    return {"outcome": outcome.value, **capture_view(state.workflow)}


@router.post("/cancel")
async def cancel(state: AppState = Depends(get_state)):
    """Discard the captured o1 and go back to step 1."""
    state.workflow.cancel_current()
    return capture_view(state.workflow)


@router.post("/undo")
async def undo(state: AppState = Depends(get_state)):
    """Remove the last row; no-op when there are none."""
    removed = state.workflow.undo_last_row()
    return {
        "removed": removed is not None,
        **capture_view(state.workflow),
    }
