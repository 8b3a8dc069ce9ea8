"""Tests for preamble selection across actions and audio modes."""

import json

import pytest

from artisan_core.errors import ConfigurationError, MissingTemplateArgument
from artisan_core.schema.action import ActionKind, AudioMode, TemplateArgs
from artisan_core.templates import PREAMBLE_REGISTRY, select_preamble, verify_registry
from artisan_core.templates.catalog import VEO_STYLES, VEO_STYLES_FOR_PROMPT
from artisan_core.templates.selector import ActionTemplate

FULL_ARGS = TemplateArgs(
    prompt_count=3,
    original_prompt="A fox trots through fresh snow at dawn.",
    theme="Cyberpunk noir",
    character_concept="Grumpy robot barista",
    concept="A lighthouse keeper befriends a whale",
    target_style="Anime",
    category="Sci-Fi",
)


@pytest.mark.parametrize("action", list(ActionKind))
@pytest.mark.parametrize("mode", list(AudioMode))
def test_every_action_has_non_empty_preamble_in_both_modes(action: ActionKind, mode: AudioMode) -> None:
    preamble = select_preamble(action, mode, "A quiet harbour at night", FULL_ARGS)

    assert isinstance(preamble, str)
    assert preamble.strip()


@pytest.mark.parametrize(
    "action",
    [action for action in ActionKind if action is not ActionKind.PARAMETER_INFERENCE],
)
def test_audio_variants_differ_from_silent_variants(action: ActionKind) -> None:
    off = select_preamble(action, AudioMode.OFF, "prompt", FULL_ARGS)
    on = select_preamble(action, AudioMode.ON, "prompt", FULL_ARGS)

    assert off != on


def test_parameter_inference_shares_one_preamble_for_both_modes() -> None:
    off = select_preamble(ActionKind.PARAMETER_INFERENCE, False, "A desert chase", FULL_ARGS)
    on = select_preamble(ActionKind.PARAMETER_INFERENCE, True, "A desert chase", FULL_ARGS)

    assert off == on
    assert "A desert chase" in off
    assert VEO_STYLES_FOR_PROMPT in off


def test_parameter_inference_without_text_mentions_image() -> None:
    args = TemplateArgs(image_b64="aGVsbG8=", image_mime_type="image/png")

    preamble = select_preamble(ActionKind.PARAMETER_INFERENCE, False, "", args)

    assert 'Concept: "See image."' in preamble


@pytest.mark.parametrize("count", [1, 3, 5])
@pytest.mark.parametrize("mode", list(AudioMode))
def test_main_generation_enumerates_requested_count(count: int, mode: AudioMode) -> None:
    preamble = select_preamble(ActionKind.MAIN_PROMPT_GENERATION, mode, "", TemplateArgs(prompt_count=count))

    assert f"exactly {count} object(s)" in preamble
    example = preamble.split("```json", 1)[1].split("```", 1)[0]
    entries = json.loads(example)
    assert len(entries) == count
    assert all(set(entry) == {"prompt_text"} for entry in entries)


def test_scene_extension_preamble_requests_prose() -> None:
    preamble = select_preamble(ActionKind.SCENE_EXTENSION, AudioMode.OFF)

    assert "ONLY output the new scene" in preamble
    assert "JSON" not in preamble


def test_boolean_audio_flag_matches_enum() -> None:
    assert select_preamble(ActionKind.CRITIQUE, True, "", FULL_ARGS) == select_preamble(
        ActionKind.CRITIQUE, AudioMode.ON, "", FULL_ARGS
    )


def test_wire_identifier_is_accepted() -> None:
    assert select_preamble("themeExplorer", AudioMode.OFF, "", FULL_ARGS) == select_preamble(
        ActionKind.THEME_EXPLORATION, AudioMode.OFF, "", FULL_ARGS
    )


def test_unknown_action_raises_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="No preamble configured for action: notAnAction"):
        select_preamble("notAnAction", AudioMode.OFF)


def test_unregistered_action_raises_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        select_preamble(ActionKind.CRITIQUE, AudioMode.OFF, "", FULL_ARGS, registry={})


def test_missing_template_argument_is_reported() -> None:
    with pytest.raises(MissingTemplateArgument) as exc_info:
        select_preamble(ActionKind.STYLE_TRANSFER, AudioMode.OFF, "", TemplateArgs(original_prompt="x"))

    assert exc_info.value.argument == "target_style"
    assert isinstance(exc_info.value, ConfigurationError)


def test_style_transfer_embeds_prompt_and_style() -> None:
    preamble = select_preamble(ActionKind.STYLE_TRANSFER, AudioMode.OFF, "", FULL_ARGS)

    assert FULL_ARGS.original_prompt in preamble
    assert "Anime" in preamble


def test_surprise_category_defaults_to_any() -> None:
    preamble = select_preamble(ActionKind.SURPRISE_CONCEPT, AudioMode.OFF)

    assert "'Any'" in preamble


def test_registry_covers_every_action() -> None:
    verify_registry()
    assert set(PREAMBLE_REGISTRY) == set(ActionKind)


def test_verify_registry_rejects_incomplete_registry() -> None:
    partial = {ActionKind.CRITIQUE: PREAMBLE_REGISTRY[ActionKind.CRITIQUE]}

    with pytest.raises(ConfigurationError, match="sceneExtender"):
        verify_registry(partial)


def test_verify_registry_rejects_template_without_silent_variant() -> None:
    template = PREAMBLE_REGISTRY[ActionKind.CRITIQUE]
    registry = dict(PREAMBLE_REGISTRY)
    registry[ActionKind.CRITIQUE] = ActionTemplate(
        template.action,
        template.shape,
        template.extract_args,
        {AudioMode.ON: template.variants[AudioMode.ON]},
    )

    with pytest.raises(ConfigurationError, match="audio-off"):
        verify_registry(registry)


def test_style_catalog_has_unique_entries() -> None:
    assert "Cinematic" in VEO_STYLES
    assert len(set(VEO_STYLES)) == len(VEO_STYLES)
