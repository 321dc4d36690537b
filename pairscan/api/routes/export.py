"""CSV export: download as text or write a file into the export directory."""
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from pairscan.api.state import AppState, get_state
from pairscan.core.csv_export import ExportError, export_filename

router = APIRouter()


@router.get("/csv", response_class=PlainTextResponse)
async def download_csv(state: AppState = Depends(get_state)):
    """Return the current records as CSV; the record list is not cleared."""
    return PlainTextResponse(
        state.csv_text(),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'},
    )


@router.post("")
async def export_csv(state: AppState = Depends(get_state)):
    """Write scan_export_<timestamp>.csv; records are kept so export can be retried."""
    try:
        result = state.export_csv()
    except ExportError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {
        "ok": True,
        "filename": result.filename,
        "path": str(result.path),
        "row_count": result.row_count,
    }
