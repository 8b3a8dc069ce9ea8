"""Outbound request payload for the generation endpoint."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from artisan_core.config import settings
from artisan_core.schema.action import ActionKind, TemplateArgs


class RequestPayload(BaseModel):
    """
    Body sent under the `json` key of the RPC request.
    Built fresh for every call.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    session_id: str = Field(alias="sessionId")
    candidate_count: int = Field(default=1, ge=1, alias="candidateCount")
    preamble: str
    prompt: str
    image: Optional[str] = None

    def to_wire(self) -> dict[str, Any]:
        # An absent image is omitted entirely; some backends reject null.
        return {
            "json": self.model_dump(by_alias=True, exclude_none=True),
            "signal": None,
        }


def build_request_payload(
    action: ActionKind,
    preamble: str,
    prompt_text: str,
    args: TemplateArgs,
    *,
    session_id: str | None = None,
) -> RequestPayload:
    candidate_count = 1
    if action is ActionKind.MAIN_PROMPT_GENERATION:
        candidate_count = args.prompt_count

    return RequestPayload(
        session_id=session_id or settings.ARTISAN_SESSION_ID,
        candidate_count=candidate_count,
        preamble=preamble,
        prompt=prompt_text or "",
        image=args.image_b64 if args.has_image else None,
    )
