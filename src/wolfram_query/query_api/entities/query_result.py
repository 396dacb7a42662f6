"""Root records of a full-results query (``/v2/query?output=JSON``).

See https://products.wolframalpha.com/api/documentation for the schema.
"""

from typing import Any

from pydantic import Field, field_validator, model_validator

from wolfram_query.query_api.decoder.shape import coerce_one_or_many
from wolfram_query.query_api.entities.assumption import Assumptions
from wolfram_query.query_api.entities.base import WolframModel
from wolfram_query.query_api.entities.pod import Pod
from wolfram_query.query_api.entities.query_error import QueryError, split_error
from wolfram_query.query_api.entities.warnings import Warnings


class Generalization(WolframModel):
    """Represents a suggestion to generalize the query for more information."""

    topic: str = ""
    description: str = Field(default="", alias="desc")
    url: str = ""


class Source(WolframModel):
    """Represents a link to a web page with source information."""

    url: str = ""
    text: str = ""


class QueryResult(WolframModel):
    """Represents the <queryresult> element returned by a full query."""

    # Caller-supplied query text, attached after decoding
    query: str = ""

    pods: list[Pod] = Field(default_factory=list)
    warnings: Warnings = Field(default_factory=Warnings)
    assumptions: Assumptions = Field(default_factory=Assumptions)
    generalizations: list[Generalization] = Field(default_factory=list, alias="generalization")
    sources: list[Source] = Field(default_factory=list)

    # Whether the input was understood; if false there are no pods
    success: bool = False
    # Whether a serious processing error occurred; if true there is no pod content
    error: bool = False
    error_detail: QueryError | None = None

    numpods: int = 0
    datatypes: str = ""  # comma separated categories of data in the result
    timedout: str = ""  # scanners that timed out (see scantimeout)
    timedoutpods: str = ""
    timing: float = 0.0  # wall-clock seconds to generate the output
    parsetiming: float = 0.0  # seconds spent in the parsing phase
    parsetimedout: bool = False
    recalculate: str = ""  # URL to recalculate the query and get more pods

    # Undocumented server identity fields
    id: str = ""
    host: str = ""
    server: str = ""
    related: str = ""
    version: str = ""  # API version that produced the result

    @model_validator(mode="before")
    @classmethod
    def _split_error(cls, data: Any) -> Any:
        return split_error(data)

    @field_validator("assumptions", mode="before")
    @classmethod
    def _assumptions_one_or_many(cls, v: Any) -> Any:
        return Assumptions.normalize(v)

    @field_validator("generalizations", "sources", mode="before")
    @classmethod
    def _one_or_many(cls, v: Any, info) -> list[Any]:
        return coerce_one_or_many(v, field=info.field_name)

    @model_validator(mode="after")
    def _check_pods(self) -> "QueryResult":
        if self.pods and not self.success:
            raise ValueError(f"unsuccessful query result carries {len(self.pods)} pods")
        if self.pods and self.error:
            raise ValueError(f"errored query result carries {len(self.pods)} pods")
        return self


class Query(WolframModel):
    """Envelope of a full query response: ``{"queryresult": {...}}``."""

    result: QueryResult = Field(alias="queryresult")
