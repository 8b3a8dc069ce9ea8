from artisan_core.brain.resolver import resolve_response, strip_code_fence

__all__ = ["resolve_response", "strip_code_fence"]
