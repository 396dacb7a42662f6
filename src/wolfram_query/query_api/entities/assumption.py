"""Assumption records.

Example ``assumptions`` value for the query 'dow chemical'::

    {
        "type": "Clash",
        "word": "dow chemical",
        "template": "Assuming \\"${word}\\" is ${desc1}. Use as ${desc2} instead",
        "count": 2,
        "values": [
            {"name": "Financial", "desc": "a financial entity", "input": "*C.dow+chemical-_*Financial-"},
            {"name": "Company", "desc": "a company", "input": "*C.dow+chemical-_*Company-"}
        ]
    }

With a single assumption the API sends that object bare; with more it sends
an array of them. ``Assumptions`` accepts both.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from wolfram_query.query_api.decoder.shape import coerce_one_or_many, decode_one_or_many
from wolfram_query.query_api.entities.action_assumption import ActionAssumption
from wolfram_query.query_api.entities.base import WolframModel


class Value(WolframModel):
    """Represents one candidate interpretation of an assumption."""

    name: str = ""  # short label
    description: str = Field(default="", alias="desc")
    input: str = ""  # token to resubmit as the assumption parameter


class Assumption(WolframModel):
    """Represents an interpretation the server chose for ambiguous input.

    ``values[0]`` is the interpretation that was used; any further values are
    alternatives the caller may switch to.
    """

    values: list[Value] = Field(default_factory=list)
    type: str = ""  # classification, e.g. "Clash", "Unit", "SubCategory"
    word: str = ""  # the word or phrase the assumption applies to
    template: str = ""  # statement with ${word}, ${desc1} and ${desc2} placeholders
    count: int = 0

    @field_validator("values", mode="before")
    @classmethod
    def _one_or_many(cls, v: Any) -> list[Any]:
        return coerce_one_or_many(v, field="values")

    def for_action_display(self) -> list[ActionAssumption]:
        """Return one ActionAssumption per alternative value."""
        from wolfram_query.query_api.decoder.actions import for_action_display  # avoid circular

        return for_action_display(self)


class Assumptions(WolframModel):
    """Represents every assumption made while parsing a query."""

    assumption: list[Assumption] = Field(default_factory=list)
    count: int = 0

    @staticmethod
    def normalize(value: Any) -> Any:
        """Map the wire ``assumptions`` value, one object or an array, onto this model's fields.

        Hooked into QueryResult validation so the rule runs on every decode.
        """
        if isinstance(value, Assumptions):
            return value
        items = coerce_one_or_many(value, field="assumptions")
        return {"assumption": items, "count": len(items)}

    @classmethod
    def from_json(cls, raw: bytes | str) -> Assumptions:
        """Decode the raw ``assumptions`` value straight from its JSON text."""
        items = decode_one_or_many(raw, Assumption, field="assumptions")
        return cls(assumption=items, count=len(items))

    def for_action_display(self) -> list[ActionAssumption]:
        """Flatten the alternatives of every assumption that has any."""
        actions: list[ActionAssumption] = []
        for assumption in self.assumption:
            if len(assumption.values) >= 2:
                actions.extend(assumption.for_action_display())
        return actions
