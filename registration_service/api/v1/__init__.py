from .auth_controller import router as auth_router
from .health_controller import router as health_router
from .error_handlers import register_error_handlers


__all__ = ["auth_router", "health_router", "register_error_handlers"]
