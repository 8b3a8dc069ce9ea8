"""Error taxonomy for preamble selection, transport and response resolution.

Every failure is a distinct exception type so callers can decide how to
present it. Nothing here is retried.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

EXCERPT_LIMIT = 500


def excerpt(value: Any, limit: int = EXCERPT_LIMIT) -> str:
    """Render a bounded, log-safe excerpt of an arbitrary fragment."""
    if isinstance(value, str):
        text = value
    else:
        try:
            text = json.dumps(value, ensure_ascii=False, default=str)
        except (TypeError, ValueError, RecursionError):
            try:
                text = repr(value)
            except Exception:  # noqa: BLE001
                text = f"<unrepresentable {type(value).__name__}>"
    if len(text) <= limit:
        return text
    return text[: max(0, limit - 3)] + "..."


class ArtisanError(Exception):
    """Base class for every error raised by artisan_core."""


class ConfigurationError(ArtisanError):
    """An action has no registered preamble. Indicates a programming defect."""

    def __init__(self, action: Any, message: str | None = None) -> None:
        self.action = action
        super().__init__(message or f"No preamble configured for action: {action}")


class MissingTemplateArgument(ConfigurationError):
    """A preamble generator needs an argument the caller did not supply."""

    def __init__(self, action: Any, argument: str) -> None:
        self.argument = argument
        super().__init__(action, f"Action '{action}' requires template argument '{argument}'.")


class ResolutionError(ArtisanError):
    """
    Base for failures while unwrapping a transport response.

    `step` names the resolution step that failed and `excerpt` holds a
    bounded copy of the offending fragment.
    """

    step = "resolution"

    def __init__(self, action: Any, detail: str, fragment: Any = None) -> None:
        self.action = action
        self.detail = detail
        self.excerpt = excerpt(fragment) if fragment is not None else ""
        super().__init__(f"[{self.step}] {detail} (action={action})")


class EnvelopeMissing(ResolutionError):
    step = "envelope"


class ParseFailure(ResolutionError):
    step = "parse"

    def __init__(
        self,
        action: Any,
        detail: str,
        fragment: Any = None,
        stripped: Any = None,
    ) -> None:
        super().__init__(action, detail, fragment)
        self.stripped_excerpt = excerpt(stripped) if stripped is not None else ""


class UnexpectedType(ResolutionError):
    step = "type"


class GeminiStructureMissing(ResolutionError):
    step = "candidates"


@dataclass
class TransportError(ArtisanError):
    status_code: int
    message: str
    payload: Any = None

    def __str__(self) -> str:
        if self.status_code:
            return f"API Error ({self.status_code}): {self.message}"
        return f"Network error during API call: {self.message}"


class ResultShapeError(ArtisanError):
    """A resolved payload does not match the documented shape of its action."""

    def __init__(self, action: Any, detail: str, value: Any = None) -> None:
        self.action = action
        self.detail = detail
        self.excerpt = excerpt(value) if value is not None else ""
        super().__init__(f"Unexpected result format for {action}: {detail}")
