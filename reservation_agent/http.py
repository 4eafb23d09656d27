from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def ok(**payload: Any) -> dict[str, Any]:
    """Success envelope: {"success": true, ...payload}."""
    return {"success": True, **jsonable_encoder(payload)}


def jerror(status: int, error: str, message: str) -> JSONResponse:
    """Failure envelope: {"error": ..., "message": ...}."""
    return JSONResponse(status_code=status, content={"error": error, "message": message})
