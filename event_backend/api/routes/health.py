from __future__ import annotations

from fastapi import APIRouter, Depends

from ...config import EventStoreConfig
from ..deps import get_config

router = APIRouter(tags=["health"])


@router.get("/health")
def health(config: EventStoreConfig = Depends(get_config)):
    return {
        "status": "ok",
        "tables": config.table_names(),
    }
