"""Preamble templates and the action registry."""

from artisan_core.templates.selector import (
    PREAMBLE_REGISTRY,
    STRUCTURED_ACTIONS,
    ActionTemplate,
    get_template,
    select_preamble,
    verify_registry,
)

__all__ = [
    "PREAMBLE_REGISTRY",
    "STRUCTURED_ACTIONS",
    "ActionTemplate",
    "get_template",
    "select_preamble",
    "verify_registry",
]
