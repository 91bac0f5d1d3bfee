from dataclasses import dataclass
from datetime import datetime

import enum


class Environment(enum.Enum):
    """Deployment environment; the value is the top-level key segment."""

    DEVELOPMENT = "dev"
    STAGING = "stage"
    PRODUCTION = "prod"

    @classmethod
    def parse(cls, text):
        """Accept a long name (``staging``) or a key tag (``stage``)."""
        normalized = (text or "").strip().lower()
        for member in cls:
            if normalized in (member.value, member.name.lower()):
                return member
        raise ValueError(f"Unknown environment: {text!r}")


class Category(enum.Enum):
    CSV = "csv"
    IMAGES = "images"


@dataclass(frozen=True)
class FileInfo:
    """One listing result. ``key`` is the full object key in the bucket."""

    key: str
    size: int
    last_modified: datetime
