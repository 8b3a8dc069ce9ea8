"""Tests for the outbound request payload."""

import pytest

from artisan_core.schema.action import ActionKind, TemplateArgs
from artisan_core.schema.request import RequestPayload, build_request_payload


@pytest.mark.parametrize("count", [1, 3, 5])
def test_main_generation_passes_candidate_count(count: int) -> None:
    payload = build_request_payload(
        ActionKind.MAIN_PROMPT_GENERATION,
        "preamble",
        "a cat",
        TemplateArgs(prompt_count=count),
    )

    assert payload.to_wire()["json"]["candidateCount"] == count


def test_other_actions_always_request_one_candidate() -> None:
    payload = build_request_payload(
        ActionKind.CRITIQUE,
        "preamble",
        "a cat",
        TemplateArgs(prompt_count=5, original_prompt="a cat"),
    )

    assert payload.candidate_count == 1


def test_wire_body_shape_without_image() -> None:
    payload = build_request_payload(ActionKind.SCENE_EXTENSION, "pre", "text", TemplateArgs())

    wire = payload.to_wire()

    assert wire == {
        "json": {
            "sessionId": "anonymous",
            "candidateCount": 1,
            "preamble": "pre",
            "prompt": "text",
        },
        "signal": None,
    }


def test_wire_body_includes_image_when_present() -> None:
    args = TemplateArgs(image_b64="aGVsbG8=", image_mime_type="image/jpeg")

    wire = build_request_payload(ActionKind.SCENE_EXTENSION, "pre", "text", args).to_wire()

    assert wire["json"]["image"] == "aGVsbG8="


def test_empty_image_is_omitted() -> None:
    wire = build_request_payload(ActionKind.SCENE_EXTENSION, "pre", "", TemplateArgs(image_b64="")).to_wire()

    assert "image" not in wire["json"]
    assert wire["json"]["prompt"] == ""


def test_explicit_session_id_overrides_default() -> None:
    payload = build_request_payload(ActionKind.STORYBOARD, "pre", "x", TemplateArgs(), session_id="abc")

    assert payload.to_wire()["json"]["sessionId"] == "abc"


def test_payload_accepts_wire_aliases() -> None:
    payload = RequestPayload.model_validate(
        {"sessionId": "s", "candidateCount": 2, "preamble": "p", "prompt": "q"}
    )

    assert payload.session_id == "s"
    assert payload.candidate_count == 2
