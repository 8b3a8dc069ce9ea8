"""Tests for unwrapping layered endpoint responses."""

import json

import pytest

from artisan_core.brain import resolve_response, strip_code_fence
from artisan_core.errors import (
    EXCERPT_LIMIT,
    EnvelopeMissing,
    GeminiStructureMissing,
    ParseFailure,
    UnexpectedType,
    excerpt,
)
from artisan_core.schema.action import ActionKind
from artisan_core.schema.response import PlainText, StructuredArray, StructuredObject
from artisan_core.templates import STRUCTURED_ACTIONS

OBJECT_PAYLOAD = {"critique": "Solid.", "suggested_enhancements": ["More light."]}
ARRAY_PAYLOAD = [{"prompt_text": "A"}, {"prompt_text": "B"}]


def _envelope(value: object) -> dict:
    return {"result": {"data": {"json": value}}}


def _candidates(output: str) -> str:
    return json.dumps({"result": {"candidates": [{"output": output}]}})


@pytest.mark.parametrize("action", sorted(STRUCTURED_ACTIONS, key=lambda a: a.value))
@pytest.mark.parametrize("payload", [OBJECT_PAYLOAD, ARRAY_PAYLOAD])
def test_candidate_output_round_trip(action: ActionKind, payload: object) -> None:
    raw = _envelope(_candidates(json.dumps(payload)))

    resolved = resolve_response(raw, action)

    assert resolved.value == payload


def test_object_resolves_to_structured_object() -> None:
    resolved = resolve_response(_envelope(_candidates(json.dumps(OBJECT_PAYLOAD))), ActionKind.CRITIQUE)

    assert isinstance(resolved, StructuredObject)
    assert resolved.data == OBJECT_PAYLOAD


def test_array_resolves_to_structured_array() -> None:
    resolved = resolve_response(
        _envelope(_candidates(json.dumps(ARRAY_PAYLOAD))), ActionKind.MAIN_PROMPT_GENERATION
    )

    assert isinstance(resolved, StructuredArray)
    assert resolved.items == ARRAY_PAYLOAD


@pytest.mark.parametrize("lang", ["json", "", "JSON"])
def test_fenced_candidate_output_is_stripped(lang: str) -> None:
    fenced = f"```{lang}\n{json.dumps(OBJECT_PAYLOAD, indent=2)}\n```"

    resolved = resolve_response(_envelope(_candidates(fenced)), ActionKind.CRITIQUE)

    assert resolved.value == OBJECT_PAYLOAD


def test_native_candidate_envelope_is_accepted() -> None:
    raw = _envelope({"result": {"candidates": [{"output": json.dumps(ARRAY_PAYLOAD)}]}})

    resolved = resolve_response(raw, ActionKind.SURPRISE_CONCEPT)

    assert resolved.value == ARRAY_PAYLOAD


@pytest.mark.parametrize("action", sorted(STRUCTURED_ACTIONS, key=lambda a: a.value))
@pytest.mark.parametrize("payload", [OBJECT_PAYLOAD, ARRAY_PAYLOAD])
def test_structured_action_accepts_direct_payload_without_candidates(action: ActionKind, payload: object) -> None:
    raw = _envelope(json.dumps(payload))

    resolved = resolve_response(raw, action)

    assert resolved.value == payload


def test_native_direct_payload_is_accepted() -> None:
    resolved = resolve_response(_envelope(ARRAY_PAYLOAD), ActionKind.MAIN_PROMPT_GENERATION)

    assert resolved.value == ARRAY_PAYLOAD


def test_raw_string_transport_body_is_parsed() -> None:
    raw = json.dumps(_envelope(_candidates(json.dumps(OBJECT_PAYLOAD))))

    resolved = resolve_response(raw, "promptCritique")

    assert resolved.value == OBJECT_PAYLOAD


def test_scene_extension_prose_returns_plain_text() -> None:
    prose = "The camera glides over a misty valley as dawn breaks."

    resolved = resolve_response(_envelope(prose), ActionKind.SCENE_EXTENSION)

    assert resolved == PlainText(text=prose)


def test_scene_extension_json_string_returns_plain_text() -> None:
    resolved = resolve_response(_envelope(json.dumps("A single quoted scene.")), ActionKind.SCENE_EXTENSION)

    assert isinstance(resolved, PlainText)
    assert resolved.text == "A single quoted scene."


def test_scene_extension_candidate_output_is_returned_verbatim() -> None:
    output = "```\nnot parsed\n```"

    resolved = resolve_response(_envelope(_candidates(output)), ActionKind.SCENE_EXTENSION)

    assert resolved == PlainText(text=output)


@pytest.mark.parametrize("action", sorted(STRUCTURED_ACTIONS, key=lambda a: a.value))
def test_structured_action_rejects_prose(action: ActionKind) -> None:
    with pytest.raises(ParseFailure) as exc_info:
        resolve_response(_envelope("Extended scene text."), action)

    assert exc_info.value.step == "parse"
    assert exc_info.value.excerpt == "Extended scene text."


def test_scene_extension_keeps_unparsable_text() -> None:
    resolved = resolve_response(_envelope("Extended scene text."), ActionKind.SCENE_EXTENSION)

    assert resolved == PlainText(text="Extended scene text.")


def test_unparsable_candidate_output_reports_stripped_text() -> None:
    with pytest.raises(ParseFailure) as exc_info:
        resolve_response(_envelope(_candidates("```json\n{not json}\n```")), ActionKind.STORYBOARD)

    assert exc_info.value.stripped_excerpt == "{not json}"
    assert "```json" in exc_info.value.excerpt


@pytest.mark.parametrize("action", list(ActionKind))
@pytest.mark.parametrize(
    "raw",
    [
        {},
        {"result": {}},
        {"result": {"data": {}}},
        {"result": {"data": {"json": None}}},
        [],
        None,
        "not json at all",
    ],
)
def test_missing_envelope_fails_for_every_action(action: ActionKind, raw: object) -> None:
    with pytest.raises(EnvelopeMissing) as exc_info:
        resolve_response(raw, action)

    assert exc_info.value.step == "envelope"


@pytest.mark.parametrize("value", [42, 1.5, True])
def test_non_text_scalar_envelope_is_unexpected_type(value: object) -> None:
    with pytest.raises(UnexpectedType):
        resolve_response(_envelope(value), ActionKind.CRITIQUE)


def test_scalar_final_value_is_unexpected_type() -> None:
    with pytest.raises(UnexpectedType):
        resolve_response(_envelope(_candidates("123")), ActionKind.CRITIQUE)


def test_scene_extension_without_text_or_candidates_fails() -> None:
    with pytest.raises(GeminiStructureMissing) as exc_info:
        resolve_response(_envelope({"something": "else"}), ActionKind.SCENE_EXTENSION)

    assert exc_info.value.step == "candidates"
    assert "something" in exc_info.value.excerpt


def test_resolution_is_deterministic() -> None:
    raw = _envelope(_candidates(json.dumps(OBJECT_PAYLOAD)))

    first = resolve_response(raw, ActionKind.ELABORATION)
    second = resolve_response(raw, ActionKind.ELABORATION)

    assert first == second


def test_strip_code_fence_leaves_unfenced_text() -> None:
    text = '{"a": 1}'

    assert strip_code_fence(text) is text
    assert strip_code_fence("```json\n[1]\n```") == "[1]"


def test_excerpt_is_bounded() -> None:
    long_value = {"text": "x" * 5000}

    clipped = excerpt(long_value)

    assert len(clipped) == EXCERPT_LIMIT
    assert clipped.endswith("...")


def test_error_excerpt_is_bounded() -> None:
    with pytest.raises(ParseFailure) as exc_info:
        resolve_response(_envelope("y" * 5000), ActionKind.CRITIQUE)

    assert len(exc_info.value.excerpt) <= EXCERPT_LIMIT


@pytest.mark.parametrize("action", sorted(STRUCTURED_ACTIONS, key=lambda a: a.value))
def test_deeply_nested_envelope_value_is_parse_failure(action: ActionKind) -> None:
    with pytest.raises(ParseFailure) as exc_info:
        resolve_response(_envelope("[" * 200000), action)

    assert len(exc_info.value.excerpt) <= EXCERPT_LIMIT


def test_deeply_nested_candidate_output_is_parse_failure() -> None:
    with pytest.raises(ParseFailure):
        resolve_response(_envelope(_candidates("[" * 200000)), ActionKind.CRITIQUE)


def test_deeply_nested_transport_body_is_envelope_missing() -> None:
    with pytest.raises(EnvelopeMissing):
        resolve_response("[" * 200000, ActionKind.STORYBOARD)


def test_excerpt_survives_unserializable_nesting() -> None:
    nested: list = []
    for _ in range(200000):
        nested = [nested]

    clipped = excerpt(nested)

    assert isinstance(clipped, str)
    assert len(clipped) <= EXCERPT_LIMIT


@pytest.mark.parametrize("action", sorted(STRUCTURED_ACTIONS, key=lambda a: a.value))
def test_json_encoded_scalar_without_candidates_is_structure_missing(action: ActionKind) -> None:
    with pytest.raises(GeminiStructureMissing) as exc_info:
        resolve_response(_envelope("42"), action)

    assert exc_info.value.excerpt == "42"
