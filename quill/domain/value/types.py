"""Domain value objects for Quill.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from quill.domain.value.common import RootValueObject


class TargetType(str, Enum):
    """Type of entity a relation points at."""

    POST = "post"
    USER = "user"


class RelationKind(str, Enum):
    """Kind of actor-to-target relation.

    All kinds share one toggle contract; they differ only in what they
    point at and whether an actor may target themselves.
    """

    LIKE = "like"
    BOOKMARK = "bookmark"
    FOLLOW = "follow"

    @property
    def target_type(self) -> TargetType:
        """Entity type this relation points at."""
        if self is RelationKind.FOLLOW:
            return TargetType.USER
        return TargetType.POST

    @property
    def allows_self(self) -> bool:
        """Whether the source may equal the target.

        Only meaningful for user targets; liking or bookmarking your own post
        is always allowed.
        """
        return self is not RelationKind.FOLLOW


class Handle(RootValueObject[str]):
    """User handle (username) as shown in profile URLs."""

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Handle must be 1-255 characters")
        return v


class Slug(RootValueObject[str]):
    """URL-safe slug for posts.

    Must be lowercase, alphanumeric with hyphens, 1-100 characters.
    Examples: 'hello-world', 'notes-on-writing-2025'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > 100:
            raise ValueError("Slug must be 1-100 characters")
        return v
