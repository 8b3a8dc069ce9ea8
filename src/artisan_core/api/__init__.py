from artisan_core.api.router import router

__all__ = ["router"]
