from .announcements import router as announcements_router
from .health import router as health_router
from .login import router as login_router
from .participants import router as participants_router
from .schedules import router as schedules_router

__all__ = [
    "announcements_router",
    "health_router",
    "login_router",
    "participants_router",
    "schedules_router",
]
