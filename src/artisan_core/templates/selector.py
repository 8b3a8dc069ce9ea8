"""
Template selector: (action, audio mode, arguments) -> preamble.

Every ActionKind is registered once with its preamble variants, the
positional arguments its generators take, and the response shape the
resolver should expect. `verify_registry` runs at import so that a new
action without a registration fails immediately rather than mid-request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from loguru import logger

from artisan_core.errors import ConfigurationError, MissingTemplateArgument
from artisan_core.logging_utils import log_event
from artisan_core.schema.action import ActionKind, AudioMode, ResponseShape, TemplateArgs
from artisan_core.templates import preambles

PreambleGenerator = Callable[..., str]
ArgumentExtractor = Callable[[str, TemplateArgs], tuple]


def _required(action: ActionKind, args: TemplateArgs, name: str) -> str:
    value = getattr(args, name)
    if value is None:
        raise MissingTemplateArgument(action.value, name)
    return value


@dataclass(frozen=True)
class ActionTemplate:
    action: ActionKind
    shape: ResponseShape
    extract_args: ArgumentExtractor
    variants: Mapping[AudioMode, PreambleGenerator] = field(default_factory=dict)

    def generator_for(self, audio_mode: AudioMode) -> PreambleGenerator | None:
        return self.variants.get(audio_mode) or self.variants.get(AudioMode.OFF)


def _variants(off: PreambleGenerator, on: PreambleGenerator | None = None) -> dict[AudioMode, PreambleGenerator]:
    variants = {AudioMode.OFF: off}
    if on is not None:
        variants[AudioMode.ON] = on
    return variants


_A = ActionKind

PREAMBLE_REGISTRY: dict[ActionKind, ActionTemplate] = {
    _A.MAIN_PROMPT_GENERATION: ActionTemplate(
        _A.MAIN_PROMPT_GENERATION,
        ResponseShape.ARRAY,
        lambda text, args: (args.prompt_count,),
        _variants(preambles.main_prompt_off, preambles.main_prompt_on),
    ),
    _A.SCENE_EXTENSION: ActionTemplate(
        _A.SCENE_EXTENSION,
        ResponseShape.TEXT,
        lambda text, args: (),
        _variants(preambles.scene_extension_off, preambles.scene_extension_on),
    ),
    _A.CRITIQUE: ActionTemplate(
        _A.CRITIQUE,
        ResponseShape.OBJECT,
        lambda text, args: (_required(_A.CRITIQUE, args, "original_prompt"),),
        _variants(preambles.critique_off, preambles.critique_on),
    ),
    _A.THEME_EXPLORATION: ActionTemplate(
        _A.THEME_EXPLORATION,
        ResponseShape.OBJECT,
        lambda text, args: (_required(_A.THEME_EXPLORATION, args, "theme"),),
        _variants(preambles.theme_off, preambles.theme_on),
    ),
    _A.ELABORATION: ActionTemplate(
        _A.ELABORATION,
        ResponseShape.OBJECT,
        lambda text, args: (_required(_A.ELABORATION, args, "original_prompt"),),
        _variants(preambles.elaboration_off, preambles.elaboration_on),
    ),
    _A.SHOT_SEQUENCE: ActionTemplate(
        _A.SHOT_SEQUENCE,
        ResponseShape.OBJECT,
        lambda text, args: (_required(_A.SHOT_SEQUENCE, args, "original_prompt"),),
        _variants(preambles.shot_sequence_off, preambles.shot_sequence_on),
    ),
    _A.CHARACTER_DETAIL: ActionTemplate(
        _A.CHARACTER_DETAIL,
        ResponseShape.OBJECT,
        lambda text, args: (_required(_A.CHARACTER_DETAIL, args, "character_concept"),),
        _variants(preambles.character_off, preambles.character_on),
    ),
    _A.STYLE_TRANSFER: ActionTemplate(
        _A.STYLE_TRANSFER,
        ResponseShape.OBJECT,
        lambda text, args: (
            _required(_A.STYLE_TRANSFER, args, "original_prompt"),
            _required(_A.STYLE_TRANSFER, args, "target_style"),
        ),
        _variants(preambles.style_transfer_off, preambles.style_transfer_on),
    ),
    _A.STORYBOARD: ActionTemplate(
        _A.STORYBOARD,
        ResponseShape.OBJECT,
        lambda text, args: (_required(_A.STORYBOARD, args, "concept"),),
        _variants(preambles.storyboard_off, preambles.storyboard_on),
    ),
    # Both audio modes share one inference preamble.
    _A.PARAMETER_INFERENCE: ActionTemplate(
        _A.PARAMETER_INFERENCE,
        ResponseShape.OBJECT,
        lambda text, args: (text, args.has_image),
        _variants(preambles.infer_visual_params),
    ),
    _A.SURPRISE_CONCEPT: ActionTemplate(
        _A.SURPRISE_CONCEPT,
        ResponseShape.ARRAY,
        lambda text, args: (args.category,),
        _variants(preambles.surprise_off, preambles.surprise_on),
    ),
}

STRUCTURED_ACTIONS = frozenset(
    action for action, template in PREAMBLE_REGISTRY.items() if template.shape is not ResponseShape.TEXT
)


def verify_registry(registry: Mapping[ActionKind, ActionTemplate] = PREAMBLE_REGISTRY) -> None:
    missing = [action.value for action in ActionKind if action not in registry]
    if missing:
        raise ConfigurationError(", ".join(missing), f"Actions without a registered preamble: {', '.join(missing)}")
    for action, template in registry.items():
        if AudioMode.OFF not in template.variants:
            raise ConfigurationError(action.value, f"Action '{action.value}' has no audio-off preamble.")


def coerce_action(action: Any) -> ActionKind:
    """Map an ActionKind or its wire identifier to an ActionKind."""
    if isinstance(action, ActionKind):
        return action
    try:
        return ActionKind(str(action))
    except ValueError as exc:
        raise ConfigurationError(action) from exc


def get_template(
    action: Any,
    registry: Mapping[ActionKind, ActionTemplate] = PREAMBLE_REGISTRY,
) -> ActionTemplate:
    kind = coerce_action(action)
    template = registry.get(kind)
    if template is None:
        logger.error(log_event("artisan.preamble.unregistered", action=kind.value))
        raise ConfigurationError(kind.value)
    return template


def select_preamble(
    action: Any,
    audio_mode: AudioMode | bool,
    text: str = "",
    args: TemplateArgs | None = None,
    *,
    registry: Mapping[ActionKind, ActionTemplate] = PREAMBLE_REGISTRY,
) -> str:
    """
    Build the preamble for `action`.

    Falls back to the audio-off variant when no variant is registered for the
    requested mode. Raises ConfigurationError when neither exists.
    """
    if not isinstance(audio_mode, AudioMode):
        audio_mode = AudioMode.from_flag(bool(audio_mode))
    template = get_template(action, registry)
    generator = template.generator_for(audio_mode)
    if generator is None:
        logger.error(log_event("artisan.preamble.no_variant", action=template.action.value, audio=audio_mode.value))
        raise ConfigurationError(template.action.value)

    positional = template.extract_args(text or "", args or TemplateArgs())
    return generator(*positional)


verify_registry()
