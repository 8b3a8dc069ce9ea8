"""
artisan-core: Veo prompt artisan.

Builds action-specific preambles, posts them to the scene-prompt generation
endpoint and resolves the layered response back into a typed payload.
"""

from artisan_core.brain import resolve_response
from artisan_core.service import ArtisanService
from artisan_core.templates import select_preamble

__version__ = "0.1.0"
__all__ = ["ArtisanService", "resolve_response", "select_preamble"]
