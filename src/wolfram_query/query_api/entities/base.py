from pydantic import BaseModel, ConfigDict


class WolframModel(BaseModel):
    """Common configuration for every decoded API record."""

    model_config = ConfigDict(
        frozen=True,  # decoded results are values, never mutated
        extra="ignore",  # the API adds undocumented keys freely
        populate_by_name=True,
        coerce_numbers_to_str=True,  # ids and versions arrive as either "2.6" or 2.6
    )
