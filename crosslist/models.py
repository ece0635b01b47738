"""
Data models shared by every stage of the crosslist pipeline.

Each stage hands the next one a fresh list of frozen records, so nothing is
mutated after it leaves the stage that built it.
"""

from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    """Gender judgment returned by the classification service."""

    MALE = "male"
    FEMALE = "female"
    UNKNOWN = "unknown"

    @classmethod
    def coerce(cls, value: object) -> "Category":
        """Map a raw service value onto a category, falling back to UNKNOWN."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return cls.UNKNOWN
        return cls.UNKNOWN


class FailurePolicy(str, Enum):
    """What the batcher does when the classification service fails."""

    DEGRADE = "degrade"
    PROPAGATE = "propagate"


@dataclass(frozen=True, slots=True)
class UserRecord:
    """One row of a follower export: username plus normalized given name."""

    username: str
    display_name: str = ""


@dataclass(frozen=True, slots=True)
class IntersectedRecord:
    """A username present in both lists, with the first list's display name."""

    username: str
    display_name: str = ""


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """Service judgment for one name."""

    name: str
    category: Category = Category.UNKNOWN
    confidence: int = 0

    @classmethod
    def unknown(cls, name: str) -> "ClassificationResult":
        return cls(name=name, category=Category.UNKNOWN, confidence=0)

    def to_dict(self) -> dict:
        return {"name": self.name, "gender": self.category.value, "confidence": self.confidence}


@dataclass(frozen=True, slots=True)
class ClassifiedRecord:
    """An intersected record joined with the result for its display name."""

    username: str
    display_name: str
    category: Category = Category.UNKNOWN
    confidence: int = 0


@dataclass(frozen=True, slots=True)
class GenderStats:
    """Aggregate counts for a classified list.

    Per-category counts only cover records that have a display name, so
    male + female + unknown == with_names.
    """

    total: int
    with_names: int
    male: int
    female: int
    unknown: int


@dataclass(frozen=True, slots=True)
class PlainExport:
    """Comma-joined usernames and display names, positionally aligned."""

    usernames: str
    display_names: str
