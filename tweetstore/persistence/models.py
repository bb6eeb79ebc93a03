"""Data models for archived statuses."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from ..text import (
    geolocation_to_string,
    hashtags_to_string,
    strip_non_ascii,
    tweet_to_words,
)

TWITTER_DATE_FORMAT = "%a %b %d %H:%M:%S %z %Y"


@dataclass
class StatusRecord:
    """A single status (tweet) as received from the API.

    Values are kept as delivered; sanitizing happens in ``to_row``.
    """

    # Identity
    id: int
    created_at: datetime
    user_screen_name: str

    # Content
    text: str
    source: str = ""
    lang: str | None = None
    hashtags: list[str] = field(default_factory=list)

    # Location
    place_name: str | None = None
    user_location: str | None = None
    geolocation: tuple[float, float] | None = None  # (latitude, longitude)

    # Engagement
    favorite_count: int = 0
    retweet_count: int = 0

    # Set when this status is a retweet
    retweeted_status: Optional["StatusRecord"] = None

    @property
    def is_retweet(self) -> bool:
        return self.retweeted_status is not None

    @property
    def stored_text(self) -> str:
        """ASCII text to archive. Retweets keep the original status's text."""
        if self.retweeted_status is not None:
            return strip_non_ascii(self.retweeted_status.text)
        return strip_non_ascii(self.text)

    def to_row(self) -> dict[str, Any]:
        """Column values for the status table."""
        text = self.stored_text
        return {
            "id": self.id,
            "createdAt": self.created_at.date(),
            "userScreenName": self.user_screen_name,
            "text": text,
            "editedText": tweet_to_words(text),
            "place": strip_non_ascii(self.place_name) if self.place_name is not None else None,
            "userPlace": (
                strip_non_ascii(self.user_location) if self.user_location is not None else None
            ),
            "source": strip_non_ascii(self.source),
            "geolocation": geolocation_to_string(self.geolocation),
            "lang": self.lang,
            "favoriteCount": self.favorite_count,
            "retweetCount": self.retweet_count,
            "hashtags": hashtags_to_string(self.hashtags),
        }

    @classmethod
    def from_json(cls, payload: dict[str, Any]) -> "StatusRecord":
        """Build a record from a Twitter API v1.1 status object.

        Raises:
            ValueError: if ``id``, ``created_at`` or ``user`` is missing, or any
                part of the payload does not have the API's shape.
        """
        try:
            user = payload["user"]
            place = payload.get("place") or {}
            entities = payload.get("entities") or {}
            retweeted = payload.get("retweeted_status")

            return cls(
                id=int(payload["id"]),
                created_at=datetime.strptime(payload["created_at"], TWITTER_DATE_FORMAT),
                user_screen_name=user["screen_name"],
                text=payload.get("full_text") or payload.get("text") or "",
                source=payload.get("source") or "",
                lang=payload.get("lang"),
                hashtags=[tag["text"] for tag in entities.get("hashtags") or []],
                place_name=place.get("name"),
                user_location=user.get("location"),
                geolocation=_parse_geolocation(payload),
                favorite_count=payload.get("favorite_count") or 0,
                retweet_count=payload.get("retweet_count") or 0,
                retweeted_status=cls.from_json(retweeted) if retweeted else None,
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid status payload: {e!r}") from e


def _parse_geolocation(payload: dict[str, Any]) -> tuple[float, float] | None:
    # GeoJSON "coordinates" is [longitude, latitude]; the legacy "geo" is [latitude, longitude]
    coordinates = payload.get("coordinates")
    if coordinates and coordinates.get("coordinates"):
        longitude, latitude = coordinates["coordinates"][:2]
        return float(latitude), float(longitude)
    geo = payload.get("geo")
    if geo and geo.get("coordinates"):
        latitude, longitude = geo["coordinates"][:2]
        return float(latitude), float(longitude)
    return None
