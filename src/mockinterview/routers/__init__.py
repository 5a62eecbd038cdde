"""API routers."""

from mockinterview.routers.answers import router as answers_router
from mockinterview.routers.auth import router as auth_router
from mockinterview.routers.interviews import router as interviews_router
from mockinterview.routers.questions import router as questions_router

__all__ = ["answers_router", "auth_router", "interviews_router", "questions_router"]
