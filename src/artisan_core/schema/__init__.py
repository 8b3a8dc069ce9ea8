"""Pydantic models shared by the template selector, transport and resolver."""

from artisan_core.schema.action import ActionKind, AudioMode, ResponseShape, TemplateArgs
from artisan_core.schema.request import RequestPayload, build_request_payload
from artisan_core.schema.response import PlainText, ResolvedPayload, StructuredArray, StructuredObject

__all__ = [
    "ActionKind",
    "AudioMode",
    "ResponseShape",
    "TemplateArgs",
    "RequestPayload",
    "build_request_payload",
    "PlainText",
    "ResolvedPayload",
    "StructuredArray",
    "StructuredObject",
]
