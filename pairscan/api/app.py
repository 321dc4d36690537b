"""FastAPI app, CORS, and route registration."""
import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Configure logging in the worker process (so workflow INFO logs are visible with uvicorn --reload)
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(name)s: %(message)s",
)

from pairscan.api.state import AppState, get_state
from pairscan.config import SCANNER_AUTOSTART, ensure_export_dir

# Import routes after state to avoid circular imports
from pairscan.api.routes import capture, export, records, scanner

__all__ = ["app", "AppState", "get_state"]

_state = get_state()


@asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_export_dir(_state.export_dir)
    if SCANNER_AUTOSTART:
        _state.scanner_service.start(asyncio.get_running_loop())

    yield

    await asyncio.to_thread(_state.scanner_service.stop)
    logging.getLogger(__name__).info(
        "Shutting down; %d records in memory are discarded", _state.workflow.record_count
    )


app = FastAPI(
    title="Pairscan API",
    description="Local REST API for two-step QR + Code128 capture and CSV export",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(capture.router, prefix="/api/capture", tags=["capture"])
app.include_router(records.router, prefix="/api/records", tags=["records"])
app.include_router(export.router, prefix="/api/export", tags=["export"])
app.include_router(scanner.router, prefix="/api/scanner", tags=["scanner"])
