"""Text normalization for stored statuses."""

import html
import re
from typing import Iterable, Optional

_NON_ASCII = re.compile(r"[^\x00-\x7f]")
_URL = re.compile(r"(?:https?://|www\.)\S+", re.IGNORECASE)
_MENTION = re.compile(r"@\w+")
_RETWEET_MARKER = re.compile(r"\bRT\b")
_WORD = re.compile(r"[a-z0-9]+(?:'[a-z]+)?")


def strip_non_ascii(value: str) -> str:
    """Replace every non-ASCII character with a space."""
    return _NON_ASCII.sub(" ", value)


def tweet_to_words(text: str) -> str:
    """Reduce tweet text to lowercase word tokens separated by single spaces.

    URLs, @mentions, the ``RT`` marker and HTML entities are dropped; hashtags
    keep their word without the ``#``.
    """
    text = html.unescape(text)
    text = _URL.sub(" ", text)
    text = _MENTION.sub(" ", text)
    text = _RETWEET_MARKER.sub(" ", text)
    return " ".join(_WORD.findall(text.lower()))


def geolocation_to_string(geolocation: Optional[tuple[float, float]]) -> Optional[str]:
    """Format a ``(latitude, longitude)`` pair as ``"lat,lon"``."""
    if geolocation is None:
        return None
    latitude, longitude = geolocation
    return f"{latitude},{longitude}"


def hashtags_to_string(hashtags: Iterable[str]) -> str:
    return " ".join(hashtags)
