"""
Documented result shapes per action.

The resolver only guarantees syntactically valid JSON; these models are the
caller-side contract for each action's fields.
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from artisan_core.errors import ResultShapeError
from artisan_core.schema.action import ActionKind
from artisan_core.schema.response import PlainText, StructuredArray, StructuredObject


class _Result(BaseModel):
    # Models drift; unknown keys are kept rather than rejected.
    model_config = ConfigDict(extra="allow")


class PromptCandidate(_Result):
    prompt_text: str


class Critique(_Result):
    critique: str
    suggested_enhancements: List[str] = Field(default_factory=list)


class ThemeIdeas(_Result):
    theme_name: str
    suggested_subjects_characters: List[str] = Field(default_factory=list)
    suggested_settings_environments: List[str] = Field(default_factory=list)
    suggested_key_objects_props: List[str] = Field(default_factory=list)
    suggested_mood_keywords_styles: List[str] = Field(default_factory=list)
    suggested_audio_elements_moods: List[str] = Field(default_factory=list)


class Elaboration(_Result):
    original_prompt: Optional[str] = None
    elaborated_prompts: List[str]


class ShotSequence(_Result):
    original_prompt: Optional[str] = None
    suggested_sequence_prompts: List[str]


class CharacterDetails(_Result):
    character_concept: Optional[str] = None
    appearance_details: List[str] = Field(default_factory=list)
    personality_quirks: List[str] = Field(default_factory=list)
    signature_items_accessories: List[str] = Field(default_factory=list)
    suggested_vocal_characteristics_sounds: List[str] = Field(default_factory=list)


class StylizedPrompt(_Result):
    stylized_prompt: str


class StoryboardShot(_Result):
    shot_number: int
    description: str
    suggested_shot_type: Optional[str] = None
    suggested_camera_angle: Optional[str] = None
    key_elements: List[str] = Field(default_factory=list)
    audio_description: Optional[str] = None


class Storyboard(_Result):
    original_concept: Optional[str] = None
    storyboard_shots: List[StoryboardShot]


class VisualParams(_Result):
    style: Optional[str] = None
    cameraAngle: Optional[str] = None
    cameraMovement: Optional[str] = None
    lighting: Optional[str] = None


class SurpriseConcept(_Result):
    concept: str
    suggestedStyle: str
    suggestedCameraAngle: Optional[str] = None
    suggestedCameraMovement: Optional[str] = None
    suggestedLighting: Optional[str] = None
    suggestedAudio: List[str] = Field(default_factory=list)


ActionResult = Union[
    str,
    List[PromptCandidate],
    List[SurpriseConcept],
    Critique,
    ThemeIdeas,
    Elaboration,
    ShotSequence,
    CharacterDetails,
    StylizedPrompt,
    Storyboard,
    VisualParams,
]

_OBJECT_MODELS: dict[ActionKind, type[_Result]] = {
    ActionKind.CRITIQUE: Critique,
    ActionKind.THEME_EXPLORATION: ThemeIdeas,
    ActionKind.ELABORATION: Elaboration,
    ActionKind.SHOT_SEQUENCE: ShotSequence,
    ActionKind.CHARACTER_DETAIL: CharacterDetails,
    ActionKind.STYLE_TRANSFER: StylizedPrompt,
    ActionKind.STORYBOARD: Storyboard,
    ActionKind.PARAMETER_INFERENCE: VisualParams,
}


def validate_result(action: ActionKind, resolved: Any) -> ActionResult:
    """Validate a resolved payload against the documented shape of `action`."""
    try:
        if action is ActionKind.SCENE_EXTENSION:
            if not isinstance(resolved, PlainText):
                raise ResultShapeError(action, "expected plain text", resolved.value)
            return resolved.text.strip()

        if action is ActionKind.MAIN_PROMPT_GENERATION:
            if isinstance(resolved, StructuredArray):
                return [PromptCandidate.model_validate(item) for item in resolved.items]
            # A single {prompt_text} object is accepted as one candidate.
            if isinstance(resolved, StructuredObject) and isinstance(resolved.data.get("prompt_text"), str):
                return [PromptCandidate.model_validate(resolved.data)]
            raise ResultShapeError(action, "expected an array of {prompt_text: string}", resolved.value)

        if action is ActionKind.SURPRISE_CONCEPT:
            if not isinstance(resolved, StructuredArray) or not resolved.items:
                raise ResultShapeError(action, "expected a non-empty array of concepts", resolved.value)
            return [SurpriseConcept.model_validate(item) for item in resolved.items]

        if not isinstance(resolved, StructuredObject):
            raise ResultShapeError(action, "expected a JSON object", resolved.value)
        return _OBJECT_MODELS[action].model_validate(resolved.data)
    except ValidationError as exc:
        raise ResultShapeError(action, str(exc), resolved.value) from exc
