from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request
from loguru import logger
from pydantic import BaseModel, Field

from artisan_core.client import format_transport_error
from artisan_core.errors import ConfigurationError, ResolutionError, TransportError
from artisan_core.logging_utils import log_event
from artisan_core.schema.action import ActionKind, AudioMode, TemplateArgs
from artisan_core.service import ArtisanService
from artisan_core.templates.catalog import PROMPT_COUNT_OPTIONS
from artisan_core.templates.selector import PREAMBLE_REGISTRY

ACTIONS_TAG = "Artisan-Actions"
HISTORY_TAG = "Artisan-History"

router = APIRouter()


class ActionRequest(BaseModel):
    audio_mode: bool = Field(default=False, description="Include audio cues in the preamble.")
    text: str = Field(default="", description="User text sent as the prompt.")
    args: TemplateArgs = Field(default_factory=TemplateArgs)


class ActionResponse(BaseModel):
    action: str
    kind: str
    value: Any


class ActionInfo(BaseModel):
    action: str
    shape: str
    audio_variant: bool
    count_options: list[int] = Field(default_factory=list)


class HistoryRequest(BaseModel):
    prompt: str


def _service(request: Request) -> ArtisanService:
    service = getattr(request.app.state, "artisan_service", None)
    if service is None:
        service = ArtisanService()
        request.app.state.artisan_service = service
    return service


@router.get("/actions", response_model=list[ActionInfo], tags=[ACTIONS_TAG])
async def list_actions() -> list[ActionInfo]:
    return [
        ActionInfo(
            action=action.value,
            shape=template.shape.value,
            audio_variant=AudioMode.ON in template.variants,
            count_options=list(PROMPT_COUNT_OPTIONS) if action is ActionKind.MAIN_PROMPT_GENERATION else [],
        )
        for action, template in PREAMBLE_REGISTRY.items()
    ]


@router.post("/actions/{action}", response_model=ActionResponse, tags=[ACTIONS_TAG])
async def run_action(action: str, payload: ActionRequest, request: Request) -> ActionResponse:
    service = _service(request)
    try:
        resolved = await service.resolve_action(action, payload.audio_mode, payload.text, payload.args)
    except ConfigurationError as exc:
        raise HTTPException(status_code=400, detail={"error": str(exc)}) from exc
    except ResolutionError as exc:
        raise HTTPException(
            status_code=502,
            detail={"error": exc.detail, "step": exc.step, "excerpt": exc.excerpt},
        ) from exc
    except TransportError as exc:
        status_code = 503 if exc.status_code == 0 else 502
        logger.warning(log_event("artisan.api.transport_failed", action=action, status=exc.status_code))
        raise HTTPException(status_code=status_code, detail=format_transport_error(exc)) from exc

    if action == ActionKind.MAIN_PROMPT_GENERATION.value and payload.text.strip():
        history = getattr(request.app.state, "history", None)
        if history is not None:
            history.add(payload.text)

    return ActionResponse(action=action, kind=resolved.kind, value=resolved.value)


@router.get("/history", response_model=list[str], tags=[HISTORY_TAG])
async def get_history(request: Request) -> list[str]:
    history = getattr(request.app.state, "history", None)
    return history.entries if history is not None else []


@router.post("/history", response_model=list[str], tags=[HISTORY_TAG])
async def add_history(payload: HistoryRequest, request: Request) -> list[str]:
    history = getattr(request.app.state, "history", None)
    if history is None:
        raise HTTPException(status_code=503, detail={"error": "Prompt history is not available."})
    history.add(payload.prompt)
    return history.entries


@router.delete("/history", response_model=list[str], tags=[HISTORY_TAG])
async def clear_history(request: Request) -> list[str]:
    history = getattr(request.app.state, "history", None)
    if history is not None:
        history.clear()
    return []
