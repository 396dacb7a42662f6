from typing import Any

from pydantic import AliasChoices, Field, field_validator

from wolfram_query.query_api.decoder.shape import coerce_one_or_many
from wolfram_query.query_api.entities.base import WolframModel


class SummaryBox(WolframModel):
    """Represents the summary box available for a recognized query."""

    path: str = ""


class FastQueryMatch(WolframModel):
    """Represents the recognizer's verdict on one query."""

    i: str = ""  # the input as understood
    accepted: bool = False  # whether Wolfram|Alpha can likely answer it
    timing: str = ""  # milliseconds spent recognizing
    domain: str = ""  # classification, e.g. "math", "money"
    result_significance_score: str = Field(default="", alias="resultsignificancescore")
    summary_box: SummaryBox | None = Field(default=None, alias="summarybox")


class FastQueryResult(WolframModel):
    """Represents a response of the fast query recognizer."""

    version: str = ""
    spelling_correction: bool = Field(
        default=False,
        validation_alias=AliasChoices("spellingCorrection", "spellingCorretion", "spelling_correction"),
    )
    build_number: str = Field(default="", alias="buildnumber")
    query: list[FastQueryMatch] = Field(default_factory=list)

    @field_validator("query", mode="before")
    @classmethod
    def _one_or_many(cls, v: Any) -> list[Any]:
        return coerce_one_or_many(v, field="query")
