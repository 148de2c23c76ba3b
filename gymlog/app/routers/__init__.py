from .meta import router as meta_router
from .users import router as users_router
from .programs import router as programs_router
from .exercises import router as exercises_router

__all__ = [
    "meta_router",
    "users_router",
    "programs_router",
    "exercises_router",
]
