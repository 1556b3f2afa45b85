from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ITEM_NAME = "New Item"
DEFAULT_ITEM_CATEGORY = "General"


class InventoryItem(BaseModel):
    """Read-only view of a caller-owned inventory entry."""

    model_config = ConfigDict(extra="ignore")

    name: str
    location: str
    category: str


class AnalysisResult(BaseModel):
    name: str
    category: str
    description: str

    @classmethod
    def default(cls) -> AnalysisResult:
        """Record used when the model output cannot be parsed."""
        return cls(name=DEFAULT_ITEM_NAME, category=DEFAULT_ITEM_CATEGORY, description="")


class Parsed(BaseModel):
    """The model answered with a schema-conformant record."""

    kind: Literal["parsed"] = "parsed"
    record: AnalysisResult


class Defaulted(BaseModel):
    """The model output was unusable and the default record was substituted."""

    kind: Literal["defaulted"] = "defaulted"
    reason: str
    record: AnalysisResult = Field(default_factory=AnalysisResult.default)


AnalysisOutcome = Annotated[Union[Parsed, Defaulted], Field(discriminator="kind")]


class ChatTurn(BaseModel):
    role: Literal["user", "model"]
    text: str
