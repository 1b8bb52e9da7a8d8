import os
from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse, PlainTextResponse
from order_tracker.config import get_settings

router = APIRouter()


@router.get("/", include_in_schema=False)
async def index():
    """Serve the login page of the bundled frontend."""
    path = os.path.join(get_settings().static_dir, "login.html")
    if not os.path.isfile(path):
        raise HTTPException(status_code=404, detail="Frontend not installed")
    return FileResponse(path)


@router.get("/test", response_class=PlainTextResponse)
async def test():
    return "Order tracker server is running!"
