"""
Route modules. Import and include in main app.
"""

from api.routes.furniture import router as furniture_router
from api.routes.health import router as health_router
from api.routes.users import router as users_router

__all__ = ["furniture_router", "health_router", "users_router"]
