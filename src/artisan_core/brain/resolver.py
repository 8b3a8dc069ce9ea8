# src/artisan_core/brain/resolver.py
"""
Response resolver for the generation endpoint.

The endpoint wraps a generation-service answer inside an RPC envelope
(`result.data.json`), and the answer itself may be a native object, a JSON
string, or a second envelope (`result.candidates[0].output`) holding a JSON
string that is sometimes fenced in markdown. Resolution is a fixed sequence
of steps; each either advances or raises a ResolutionError subclass.
"""

from __future__ import annotations

import json
import re
from typing import Any, Optional

from loguru import logger

from artisan_core.errors import EnvelopeMissing, GeminiStructureMissing, ParseFailure, UnexpectedType
from artisan_core.logging_utils import log_event
from artisan_core.schema.action import ActionKind
from artisan_core.schema.response import PlainText, StructuredArray, StructuredObject
from artisan_core.templates.selector import STRUCTURED_ACTIONS, coerce_action

_FENCE_PATTERN = re.compile(r"^```(\w*)?\s*\n?(.*?)\n?\s*```$", re.DOTALL)

_MISSING = object()


def _dig(value: Any, *path: Any) -> Any:
    """Follow dict keys / list indexes, returning _MISSING on the first gap."""
    current = value
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or len(current) <= key:
                return _MISSING
            current = current[key]
        else:
            if not isinstance(current, dict) or key not in current:
                return _MISSING
            current = current[key]
    return current


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------


def extract_envelope(raw: Any, action: ActionKind) -> Any:
    """Step 1: locate `result.data.json` in the transport response."""
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            raise EnvelopeMissing(action.value, "Transport body is not JSON.", raw) from exc

    value = _dig(raw, "result", "data", "json")
    if value is _MISSING or value is None:
        logger.error(log_event("artisan.resolve.envelope_missing", action=action.value))
        raise EnvelopeMissing(action.value, "API response structure unexpected ('json' field missing).", raw)
    return value


def decode_primary(value: Any, action: ActionKind) -> tuple[Any, Optional[PlainText]]:
    """
    Step 2: decode the envelope value.

    Returns the decoded value, plus a PlainText when scene extension received
    prose instead of JSON.
    """
    if isinstance(value, str):
        try:
            return json.loads(value), None
        except (ValueError, RecursionError) as exc:
            if action is ActionKind.SCENE_EXTENSION:
                logger.warning(log_event("artisan.resolve.direct_text", action=action.value, chars=len(value)))
                return None, PlainText(text=value)
            logger.error(log_event("artisan.resolve.primary_parse_failed", action=action.value))
            raise ParseFailure(action.value, "API's 'json' field was a non-JSON string.", value) from exc

    if isinstance(value, (dict, list)):
        logger.warning(log_event("artisan.resolve.native_object", action=action.value, type=type(value).__name__))
        return value, None

    logger.error(log_event("artisan.resolve.unexpected_type", action=action.value, type=type(value).__name__))
    raise UnexpectedType(action.value, f"API's 'json' field had unexpected type {type(value).__name__}.", value)


def extract_candidate_output(decoded: Any) -> Optional[str]:
    """Step 4a: read `result.candidates[0].output` when it is a string."""
    output = _dig(decoded, "result", "candidates", 0, "output")
    if isinstance(output, str):
        return output
    return None


def strip_code_fence(text: str) -> str:
    """Remove a surrounding ```lang ... ``` fence, if there is one."""
    match = _FENCE_PATTERN.match(text.strip())
    if match and match.group(2):
        return match.group(2).strip()
    return text


def parse_candidate_output(output: str, action: ActionKind) -> Any:
    """Step 4b: parse the candidate output string, after fence stripping."""
    stripped = strip_code_fence(output)
    if stripped is not output:
        logger.warning(log_event("artisan.resolve.fence_stripped", action=action.value))
    try:
        return json.loads(stripped)
    except (ValueError, RecursionError) as exc:
        logger.error(log_event("artisan.resolve.output_parse_failed", action=action.value))
        raise ParseFailure(
            action.value,
            "API's '.output' field was not valid JSON.",
            output,
            stripped=stripped,
        ) from exc


def as_resolved(value: Any, action: ActionKind) -> PlainText | StructuredObject | StructuredArray:
    """Step 5: tag the final value by its JSON shape."""
    if isinstance(value, dict):
        return StructuredObject(data=value)
    if isinstance(value, list):
        return StructuredArray(items=value)
    if isinstance(value, str):
        return PlainText(text=value)
    raise UnexpectedType(action.value, f"Resolved value has unsupported type {type(value).__name__}.", value)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def resolve_response(raw: Any, action: Any) -> PlainText | StructuredObject | StructuredArray:
    """
    Unwrap a raw transport response into the action's payload.

    Scene extension may short-circuit to PlainText at steps 2, 3 or 4.
    Structured actions fall back to the decoded step-2 value when the
    candidate envelope is absent.
    """
    kind = coerce_action(action)

    envelope_value = extract_envelope(raw, kind)
    decoded, direct_text = decode_primary(envelope_value, kind)
    if direct_text is not None:
        return direct_text

    # Step 3
    if kind is ActionKind.SCENE_EXTENSION and isinstance(decoded, str):
        logger.warning(log_event("artisan.resolve.parsed_string", action=kind.value))
        return PlainText(text=decoded)

    output = extract_candidate_output(decoded)
    if output is not None:
        if kind is ActionKind.SCENE_EXTENSION:
            return PlainText(text=output)
        return as_resolved(parse_candidate_output(output, kind), kind)

    if isinstance(decoded, (dict, list)) and kind in STRUCTURED_ACTIONS:
        logger.warning(log_event("artisan.resolve.direct_payload", action=kind.value))
        return as_resolved(decoded, kind)

    logger.error(log_event("artisan.resolve.candidates_missing", action=kind.value))
    raise GeminiStructureMissing(
        kind.value,
        "API JSON missing candidate structure or recognizable direct payload.",
        decoded,
    )
