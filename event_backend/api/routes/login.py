from __future__ import annotations

from fastapi import APIRouter, Depends

from ...handlers import LoginApi
from ..deps import get_login_api
from ..responses import error_response

router = APIRouter(tags=["login"])


# Credentials travel in the path and end up in access logs.
@router.post("/login/{email}/{password}")
def login(
    email: str,
    password: str,
    api: LoginApi = Depends(get_login_api),
):
    result = api.verify(email, password)
    if result.success:
        return result.data
    return error_response()
