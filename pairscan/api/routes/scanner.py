"""Camera scanner start/stop and simulated reads."""
import asyncio

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from pairscan.api.routes.capture import capture_view
from pairscan.api.state import AppState, get_state
from pairscan.models.scan import Symbology

router = APIRouter()


class SimulateBody(BaseModel):
    value: str
    symbology: str = Symbology.QR.value


def _scanner_status(state: AppState) -> dict:
    service = state.scanner_service
    last = service.last_event
    return {
        "running": service.is_running,
        "simulated": service.is_simulated,
        "last_value": last.value if last else None,
        "last_symbology": last.symbology.value if last else None,
    }


@router.get("")
async def get_scanner(state: AppState = Depends(get_state)):
    """Return whether the camera loop is running."""
    return _scanner_status(state)


@router.post("/start")
async def start_scanner(state: AppState = Depends(get_state)):
    """Open the camera and start decoding frames."""
    started = state.scanner_service.start(asyncio.get_running_loop())
    return {"started": started, **_scanner_status(state)}


@router.post("/stop")
async def stop_scanner(state: AppState = Depends(get_state)):
    """Stop decoding and release the camera."""
    await asyncio.to_thread(state.scanner_service.stop)
    return _scanner_status(state)


@router.post("/simulate")
async def simulate_read(body: SimulateBody, state: AppState = Depends(get_state)):
    """For development: push a read through the scanner path as if the camera decoded it."""
    outcome = state.scanner_service.submit(body.value, Symbology.parse(body.symbology))
    return {"outcome": outcome.value, **capture_view(state.workflow)}
