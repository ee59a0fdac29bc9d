from .pets import router as pets_router
from .auth import router as auth_router

__all__ = [
    "pets_router",
    "auth_router",
]
