"""Caller-facing surface: one action in, one resolved payload out."""

from __future__ import annotations

from typing import Any, Optional

import httpx
from loguru import logger

from artisan_core.brain.resolver import resolve_response
from artisan_core.client import post_rpc, post_rpc_sync
from artisan_core.config import settings
from artisan_core.errors import ResolutionError
from artisan_core.logging_utils import log_event
from artisan_core.schema.action import ActionKind, AudioMode, TemplateArgs
from artisan_core.schema.request import RequestPayload, build_request_payload
from artisan_core.schema.response import PlainText, StructuredArray, StructuredObject
from artisan_core.schema.results import (
    CharacterDetails,
    Critique,
    Elaboration,
    PromptCandidate,
    ShotSequence,
    Storyboard,
    StylizedPrompt,
    SurpriseConcept,
    ThemeIdeas,
    VisualParams,
    validate_result,
)
from artisan_core.templates.selector import coerce_action, select_preamble

Resolved = PlainText | StructuredObject | StructuredArray


class ArtisanService:
    """
    Dispatches actions to the generation endpoint.

    Holds only immutable configuration; audio mode is passed per call and
    never stored, so one instance can serve concurrent calls.
    """

    def __init__(
        self,
        endpoint: str | None = None,
        *,
        session_id: str | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | httpx.BaseTransport | None = None,
    ) -> None:
        self._endpoint = (endpoint or settings.ARTISAN_API_ENDPOINT).strip()
        self._session_id = session_id or settings.ARTISAN_SESSION_ID
        self._timeout_seconds = max(1.0, float(timeout_seconds or settings.ARTISAN_REQUEST_TIMEOUT))
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def prepare(
        self,
        action: Any,
        audio_mode: AudioMode | bool,
        text: str,
        args: TemplateArgs | None = None,
    ) -> tuple[ActionKind, RequestPayload]:
        kind = coerce_action(action)
        mode = audio_mode if isinstance(audio_mode, AudioMode) else AudioMode.from_flag(bool(audio_mode))
        template_args = args or TemplateArgs()
        preamble = select_preamble(kind, mode, text, template_args)
        payload = build_request_payload(kind, preamble, text, template_args, session_id=self._session_id)
        logger.info(
            log_event(
                "artisan.action.dispatch",
                action=kind.value,
                audio=mode.value,
                candidates=payload.candidate_count,
                image=payload.image is not None,
                prompt_chars=len(payload.prompt),
            )
        )
        return kind, payload

    def _resolve(self, raw: Any, kind: ActionKind) -> Resolved:
        try:
            resolved = resolve_response(raw, kind)
        except ResolutionError as exc:
            logger.error(
                log_event("artisan.action.failed", action=kind.value, step=exc.step, excerpt=exc.excerpt[:120])
            )
            raise
        logger.info(log_event("artisan.action.resolved", action=kind.value, kind=resolved.kind))
        return resolved

    async def resolve_action(
        self,
        action: Any,
        audio_mode: AudioMode | bool,
        text: str,
        args: TemplateArgs | None = None,
    ) -> Resolved:
        kind, payload = self.prepare(action, audio_mode, text, args)
        raw = await post_rpc(
            payload.to_wire(),
            endpoint=self._endpoint,
            timeout=self._timeout_seconds,
            transport=self._transport,
        )
        return self._resolve(raw, kind)

    def resolve_action_sync(
        self,
        action: Any,
        audio_mode: AudioMode | bool,
        text: str,
        args: TemplateArgs | None = None,
    ) -> Resolved:
        kind, payload = self.prepare(action, audio_mode, text, args)
        raw = post_rpc_sync(
            payload.to_wire(),
            endpoint=self._endpoint,
            timeout=self._timeout_seconds,
            transport=self._transport,
        )
        return self._resolve(raw, kind)

    # ------------------------------------------------------------------
    # Feature operations
    # ------------------------------------------------------------------

    async def _run(self, action: ActionKind, audio: bool, text: str, args: TemplateArgs) -> Any:
        resolved = await self.resolve_action(action, audio, text, args)
        return validate_result(action, resolved)

    async def generate_prompts(
        self,
        description: str,
        *,
        count: int = 1,
        audio: bool = False,
        image_b64: Optional[str] = None,
        image_mime_type: Optional[str] = None,
    ) -> list[PromptCandidate]:
        args = TemplateArgs(prompt_count=count, image_b64=image_b64, image_mime_type=image_mime_type)
        return await self._run(ActionKind.MAIN_PROMPT_GENERATION, audio, description, args)

    async def extend_scene(
        self,
        description: str,
        *,
        audio: bool = False,
        image_b64: Optional[str] = None,
        image_mime_type: Optional[str] = None,
    ) -> str:
        args = TemplateArgs(image_b64=image_b64, image_mime_type=image_mime_type)
        return await self._run(ActionKind.SCENE_EXTENSION, audio, description, args)

    async def critique_prompt(self, prompt: str, *, audio: bool = False) -> Critique:
        return await self._run(ActionKind.CRITIQUE, audio, prompt, TemplateArgs(original_prompt=prompt))

    async def explore_theme(self, theme: str, *, audio: bool = False) -> ThemeIdeas:
        return await self._run(ActionKind.THEME_EXPLORATION, audio, f"Theme: {theme}", TemplateArgs(theme=theme))

    async def elaborate_prompt(self, prompt: str, *, audio: bool = False) -> Elaboration:
        return await self._run(ActionKind.ELABORATION, audio, prompt, TemplateArgs(original_prompt=prompt))

    async def suggest_sequence(self, prompt: str, *, audio: bool = False) -> ShotSequence:
        return await self._run(ActionKind.SHOT_SEQUENCE, audio, prompt, TemplateArgs(original_prompt=prompt))

    async def generate_character_details(self, concept: str, *, audio: bool = False) -> CharacterDetails:
        return await self._run(
            ActionKind.CHARACTER_DETAIL,
            audio,
            f"Character Concept: {concept}",
            TemplateArgs(character_concept=concept),
        )

    async def transfer_style(self, prompt: str, target_style: str, *, audio: bool = False) -> StylizedPrompt:
        args = TemplateArgs(original_prompt=prompt, target_style=target_style)
        return await self._run(ActionKind.STYLE_TRANSFER, audio, prompt, args)

    async def generate_storyboard(self, concept: str, *, audio: bool = False) -> Storyboard:
        return await self._run(ActionKind.STORYBOARD, audio, f"Concept: {concept}", TemplateArgs(concept=concept))

    async def infer_visual_params(
        self,
        description: str,
        *,
        image_b64: Optional[str] = None,
        image_mime_type: Optional[str] = None,
    ) -> VisualParams:
        args = TemplateArgs(image_b64=image_b64, image_mime_type=image_mime_type)
        return await self._run(ActionKind.PARAMETER_INFERENCE, False, description, args)

    async def surprise_me(self, category: str = "Any", *, audio: bool = False) -> list[SurpriseConcept]:
        category = category or "Any"
        return await self._run(
            ActionKind.SURPRISE_CONCEPT,
            audio,
            f"User-selected category hint: {category}",
            TemplateArgs(category=category),
        )
