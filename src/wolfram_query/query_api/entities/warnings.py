from typing import Any

from pydantic import Field, field_validator

from wolfram_query.query_api.decoder.shape import coerce_one_or_many
from wolfram_query.query_api.entities.base import WolframModel


class Spellcheck(WolframModel):
    """Represents a spelling correction applied to the input."""

    word: str = ""
    suggestion: str = ""
    text: str = ""


class Delimiters(WolframModel):
    """Represents a fix for mismatched delimiters such as ``sin(x``."""

    text: str = ""


class Translation(WolframModel):
    """Represents a translation of a non-English query into English."""

    phrase: str = ""
    translation: str = Field(default="", alias="trans")
    language: str = Field(default="", alias="lang")
    text: str = ""


class Alternative(WolframModel):
    """Represents one alternative reinterpretation of the input."""

    val: str = ""
    score: str = ""
    level: str = ""


class ReInterpretation(WolframModel):
    """Represents an automatic reinterpretation of a query that was not understood."""

    alternatives: list[Alternative] = Field(default_factory=list, alias="alternative")
    text: str = ""
    new: str = ""

    @field_validator("alternatives", mode="before")
    @classmethod
    def _one_or_many(cls, v: Any) -> list[Any]:
        return coerce_one_or_many(v, field="alternative")


class Warnings(WolframModel):
    """Represents the warnings issued while interpreting a query."""

    count: int = 0
    spellchecks: list[Spellcheck] = Field(default_factory=list, alias="spellcheck")
    delimiters: list[Delimiters] = Field(default_factory=list)
    translations: list[Translation] = Field(default_factory=list, alias="translation")
    reinterpretations: list[ReInterpretation] = Field(default_factory=list, alias="reinterpret")

    @field_validator("spellchecks", "delimiters", "translations", "reinterpretations", mode="before")
    @classmethod
    def _one_or_many(cls, v: Any, info) -> list[Any]:
        return coerce_one_or_many(v, field=info.field_name)
