"""JSON envelopes shared by the HTTP routes."""
from __future__ import annotations

from typing import Any, Dict

from fastapi import status
from fastapi.responses import JSONResponse

# Clients match on this exact text, spelling included.
GENERIC_ERROR_MESSAGE = "Error Occured !!!"


def success_body(key: str, value: Any) -> Dict[str, Any]:
    return {"success": True, key: value}


def error_response(message: str = GENERIC_ERROR_MESSAGE) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": message},
    )
