import logging
from typing import Any

from pydantic import Field, model_validator

from wolfram_query.query_api.entities.base import WolframModel
from wolfram_query.query_api.entities.query_error import QueryError, split_error
from wolfram_query.query_api.entities.subpod import SubPod

logger = logging.getLogger(__name__)


class State(WolframModel):
    """Represents a refinement of pod detail (a button on the website).

    ``input`` can be sent back as the ``podstate`` parameter; it is not URL
    encoded by the API.
    """

    name: str = ""
    input: str = ""


class Pod(WolframModel):
    """Represents one titled section of a query result."""

    subpods: list[SubPod] = Field(default_factory=list)
    states: list[State] = Field(default_factory=list)  # alternative refinements
    title: str = ""  # pod title, e.g. "Result"
    scanner: str = ""  # scanner that produced the pod, a guide to its data
    error: bool = False  # a processing error occurred for this pod
    error_detail: QueryError | None = None
    position: int = 0  # display order, typically multiples of 100
    id: str = ""  # unique identifier, used with includepodid/excludepodid
    numsubpods: int = 0  # informational, the subpods list is authoritative

    @model_validator(mode="before")
    @classmethod
    def _split_error(cls, data: Any) -> Any:
        return split_error(data)

    @model_validator(mode="after")
    def _check_subpod_count(self) -> "Pod":
        if self.numsubpods != len(self.subpods):
            logger.debug(
                "Pod %r reports %d subpods but carries %d", self.title, self.numsubpods, len(self.subpods)
            )
        return self
