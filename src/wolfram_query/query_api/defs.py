# -----------------------------------------------------------------------------
# Request enums and endpoint defaults for the Wolfram|Alpha APIs
# -----------------------------------------------------------------------------
from enum import Enum

QUERY_URL = "https://api.wolframalpha.com/v2/query"            # full results, JSON
SIMPLE_URL = "https://api.wolframalpha.com/v1/simple"          # single image
SHORT_ANSWER_URL = "https://api.wolframalpha.com/v1/result"    # plain text answer
SPOKEN_ANSWER_URL = "https://api.wolframalpha.com/v1/spoken"   # sentence for speech
FAST_QUERY_URL = "https://www.wolframalpha.com/queryrecognizer/query.jsp"


class Unit(Enum):
    """Unit system for the short and spoken answer endpoints."""

    IMPERIAL = "imperial"
    METRIC = "metric"


class Mode(Enum):
    """Recognition mode for the fast query recognizer."""

    DEFAULT = "Default"
    VOICE = "Voice"
