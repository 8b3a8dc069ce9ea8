"""Action identifiers and per-call template arguments."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ActionKind(str, Enum):
    """Supported prompt-crafting operations, keyed by their wire identifiers."""

    MAIN_PROMPT_GENERATION = "mainPromptGen"
    SCENE_EXTENSION = "sceneExtender"
    CRITIQUE = "promptCritique"
    THEME_EXPLORATION = "themeExplorer"
    ELABORATION = "promptElaboration"
    SHOT_SEQUENCE = "shotSequenceGen"
    CHARACTER_DETAIL = "charDetailGen"
    STYLE_TRANSFER = "styleTransfer"
    STORYBOARD = "storyboardGen"
    PARAMETER_INFERENCE = "inferVisualParams"
    SURPRISE_CONCEPT = "surpriseMe"


class AudioMode(str, Enum):
    ON = "on"
    OFF = "off"

    @classmethod
    def from_flag(cls, enabled: bool) -> "AudioMode":
        return cls.ON if enabled else cls.OFF


class ResponseShape(str, Enum):
    TEXT = "text"
    OBJECT = "object"
    ARRAY = "array"


class TemplateArgs(BaseModel):
    """
    Per-action preamble parameters supplied by the caller.

    Only the fields an action needs are read; the rest are ignored.
    The image is expected to be validated (size, MIME type) upstream.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    prompt_count: int = Field(default=1, ge=1, description="Number of prompts for main generation.")
    original_prompt: Optional[str] = Field(default=None, description="Prior prompt text to critique, elaborate, sequence or restyle.")
    theme: Optional[str] = None
    character_concept: Optional[str] = None
    concept: Optional[str] = Field(default=None, description="Core concept for storyboards.")
    target_style: Optional[str] = None
    category: str = Field(default="Any", description="Category hint for surprise concepts.")
    image_b64: Optional[str] = Field(default=None, description="Base64 image payload, without data URL prefix.")
    image_mime_type: Optional[str] = None

    @property
    def has_image(self) -> bool:
        return bool(self.image_b64)
