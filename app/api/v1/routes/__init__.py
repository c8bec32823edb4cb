"""
API v1 routes package.
"""

from .user_routes import router as user_router
from .profile_routes import router as profile_router
from .log_routes import router as log_router
from .plan_routes import router as plan_router
from .milestone_routes import router as milestone_router
from .completion_routes import router as completion_router

__all__ = [
    "user_router",
    "profile_router",
    "log_router",
    "plan_router",
    "milestone_router",
    "completion_router"
]
