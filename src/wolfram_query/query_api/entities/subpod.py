from pydantic import Field

from wolfram_query.query_api.entities.base import WolframModel
from wolfram_query.query_api.entities.image import Img


class SubPod(WolframModel):
    """Represents one rendering (text and/or image) within a pod."""

    img: Img = Field(default_factory=Img)
    plaintext: str = ""  # textual representation of the subpod
    title: str = ""  # usually empty, most subpods have no title
