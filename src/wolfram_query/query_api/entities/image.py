from wolfram_query.query_api.entities.base import WolframModel


class Img(WolframModel):
    """Represents an <img> element pointing at a rendered subpod image.

    Images are GIF in most cases and occasionally JPEG; the ``src`` filename
    tells which.
    """

    src: str = ""  # exact URL of the image
    alt: str = ""  # alternate text, usually the plaintext of the subpod
    title: str = ""  # descriptive title, usually the plaintext of the subpod
    width: int = 0  # width in pixels
    height: int = 0  # height in pixels
    contenttype: str = ""  # MIME type, e.g. "image/gif"
