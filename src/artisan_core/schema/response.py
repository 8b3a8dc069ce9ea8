"""Resolved payload: the only value handed back to callers."""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class PlainText(BaseModel):
    """Prose output, produced only by scene extension."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str

    @property
    def value(self) -> str:
        return self.text


class StructuredObject(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["object"] = "object"
    data: dict[str, Any]

    @property
    def value(self) -> dict[str, Any]:
        return self.data


class StructuredArray(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["array"] = "array"
    items: list[Any]

    @property
    def value(self) -> list[Any]:
        return self.items


ResolvedPayload = Annotated[
    Union[PlainText, StructuredObject, StructuredArray],
    Field(discriminator="kind"),
]
