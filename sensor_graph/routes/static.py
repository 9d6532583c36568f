"""Static page routes"""
from pathlib import Path

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse

router = APIRouter()


def _static_file(request: Request, name: str) -> FileResponse:
    path = Path(request.app.state.config.settings.static_dir) / name
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(path)


@router.get("/", include_in_schema=False)
async def index(request: Request):
    return _static_file(request, "index.html")


@router.get("/style.css", include_in_schema=False)
async def style(request: Request):
    return _static_file(request, "style.css")
