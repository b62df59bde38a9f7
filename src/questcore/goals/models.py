# src/questcore/goals/models.py
"""
Goal variants and their reward rules.

A goal is one of three variants, modelled as a tagged union of Pydantic
models discriminated on ``kind``:

- ``SimpleGoal``: pays out once, then is complete for good.
- ``EternalGoal``: pays out on every event and never completes.
- ``ChecklistGoal``: pays out per event until ``times_required`` events
  have been recorded; the completing event also pays ``bonus_points``.

Every variant exposes the same four operations (``is_complete``,
``record_event``, ``status_label``, ``encode``) so callers never need to
branch on the variant themselves.

Example:
    >>> goal = build_goal("checklist", name="Temple", description="Attend",
    ...                   point_value=50, times_required=3, bonus_points=500)
    >>> [goal.record_event() for _ in range(4)]
    [50, 50, 550, 0]
    >>> goal.status_label()
    '[X] Completed 3/3 times'
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, TypeAdapter, model_validator
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError

FIELD_DELIMITER = "|"
"""Separates fields within one persisted goal record."""

_RESERVED_CHARACTERS = (FIELD_DELIMITER, "\n", "\r")


# =============================================================================
# Enums
# =============================================================================


class GoalKind(str, Enum):
    """
    The goal variants. Values are the tags used in persisted records.
    """

    SIMPLE = "SimpleGoal"
    ETERNAL = "EternalGoal"
    CHECKLIST = "ChecklistGoal"

    @classmethod
    def _missing_(cls, value: object):  # type: ignore[misc]
        """
        Accept case-insensitive tags and the short names "simple",
        "eternal" and "checklist".
        """
        if isinstance(value, str):
            lower_value = value.strip().lower()
            for member in cls:
                if lower_value in (member.value.lower(), member.name.lower()):
                    return member
        return None


# =============================================================================
# Shared field types
# =============================================================================


def _check_free_text(value: str) -> str:
    """Reject blank text and characters reserved by the record format."""
    if not value.strip():
        raise ValueError("must not be blank")
    for reserved in _RESERVED_CHARACTERS:
        if reserved in value:
            raise ValueError(f"must not contain {reserved!r}")
    return value


GoalText = Annotated[
    str,
    Field(strict=True, min_length=1, frozen=True),
    AfterValidator(_check_free_text),
]
"""Name or description: non-blank, single-line, delimiter-free, immutable."""

PointValue = Annotated[int, Field(strict=True, ge=0, frozen=True)]
"""Points awarded per qualifying event; fixed at creation."""

def _join_fields(*fields: Any) -> str:
    return FIELD_DELIMITER.join(str(f) for f in fields)


class _GoalModel(BaseModel):
    """
    Shared behaviour of the goal variants.

    Pydantic errors raised while building or assigning a goal surface as
    QuestCore ``ValidationError``s. Progress fields are frozen; only
    ``record_event`` advances them, through ``_advance``.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as exc:
            raise to_validation_error(exc) from exc

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except PydanticValidationError as exc:
            raise to_validation_error(exc) from exc

    def _advance(self, name: str, value: Any) -> None:
        # Bypasses the frozen check; callers have already validated value.
        object.__setattr__(self, name, value)


# =============================================================================
# Variants
# =============================================================================


class SimpleGoal(_GoalModel):
    """
    A goal that is accomplished once.

    The first recorded event marks it complete and awards ``point_value``;
    any later event awards nothing.

    Attributes:
        name: Short name shown in listings.
        description: Longer description of the goal.
        point_value: Points awarded on completion.
        completed: Whether the goal has been accomplished.
    """

    kind: Literal["SimpleGoal"] = Field(default="SimpleGoal", frozen=True)
    name: GoalText
    description: GoalText
    point_value: PointValue
    completed: bool = Field(default=False, strict=True, frozen=True)

    def is_complete(self) -> bool:
        return self.completed

    def record_event(self) -> int:
        """Mark the goal complete, returning the points earned (0 if already done)."""
        if self.completed:
            return 0
        self._advance("completed", True)
        return self.point_value

    def status_label(self) -> str:
        return "[X]" if self.completed else "[ ]"

    def encode(self) -> str:
        return _join_fields(self.kind, self.name, self.description, self.point_value, self.completed)


class EternalGoal(_GoalModel):
    """
    A goal that is never finished; every recorded event awards ``point_value``.
    """

    kind: Literal["EternalGoal"] = Field(default="EternalGoal", frozen=True)
    name: GoalText
    description: GoalText
    point_value: PointValue

    def is_complete(self) -> bool:
        return False

    def record_event(self) -> int:
        return self.point_value

    def status_label(self) -> str:
        return "[∞]"

    def encode(self) -> str:
        return _join_fields(self.kind, self.name, self.description, self.point_value)


class ChecklistGoal(_GoalModel):
    """
    A goal that must be accomplished a set number of times.

    Each event up to ``times_required`` awards ``point_value``; the event that
    reaches ``times_required`` also awards ``bonus_points`` once. After that
    the goal is complete and further events award nothing.

    Attributes:
        name: Short name shown in listings.
        description: Longer description of the goal.
        point_value: Points awarded per event.
        times_required: Events needed to complete the goal (>= 1).
        bonus_points: One-time bonus on the completing event.
        times_completed: Events recorded so far, never above times_required.
    """

    kind: Literal["ChecklistGoal"] = Field(default="ChecklistGoal", frozen=True)
    name: GoalText
    description: GoalText
    point_value: PointValue
    times_required: int = Field(strict=True, ge=1, frozen=True)
    bonus_points: int = Field(strict=True, ge=0, frozen=True)
    times_completed: int = Field(default=0, strict=True, ge=0, frozen=True)

    @model_validator(mode="after")
    def check_progress(self) -> ChecklistGoal:
        if self.times_completed > self.times_required:
            raise ValueError(
                f"times_completed ({self.times_completed}) exceeds "
                f"times_required ({self.times_required})"
            )
        return self

    def is_complete(self) -> bool:
        return self.times_completed >= self.times_required

    def record_event(self) -> int:
        """
        Count one more completion.

        Returns:
            ``point_value``, plus ``bonus_points`` if this event completes
            the checklist, or 0 if it was already complete.
        """
        if self.is_complete():
            return 0
        self._advance("times_completed", self.times_completed + 1)
        if self.is_complete():
            return self.point_value + self.bonus_points
        return self.point_value

    def status_label(self) -> str:
        check_mark = "[X]" if self.is_complete() else "[ ]"
        return f"{check_mark} Completed {self.times_completed}/{self.times_required} times"

    def encode(self) -> str:
        return _join_fields(
            self.kind,
            self.name,
            self.description,
            self.point_value,
            self.times_completed,
            self.times_required,
            self.bonus_points,
        )


Goal = Annotated[Union[SimpleGoal, EternalGoal, ChecklistGoal], Field(discriminator="kind")]
"""Any goal variant, discriminated on ``kind``."""

GOAL_TYPES = (SimpleGoal, EternalGoal, ChecklistGoal)

_GOAL_ADAPTER: TypeAdapter[Goal] = TypeAdapter(Goal)


# =============================================================================
# Construction
# =============================================================================


def resolve_kind(kind: GoalKind | str) -> GoalKind:
    """Turn a tag or alias into a GoalKind, raising ValidationError if unknown."""
    try:
        return GoalKind(kind)
    except ValueError:
        raise ValidationError(f"Unknown goal type {kind!r}.", field="kind") from None


def build_goal(kind: GoalKind | str, **params: Any) -> Goal:
    """
    Construct and validate a goal of the given variant.

    Args:
        kind: Variant as a GoalKind, persisted tag, or short alias.
        **params: Variant fields (``name``, ``description``, ``point_value``
            and, for checklists, ``times_required``, ``bonus_points``).

    Returns:
        The new goal.

    Raises:
        ValidationError: If the kind is unknown, a required field is missing,
            an unexpected field is given, or a value breaks a goal rule.
    """
    resolved = resolve_kind(kind)
    try:
        return _GOAL_ADAPTER.validate_python({**params, "kind": resolved.value})
    except PydanticValidationError as exc:
        raise to_validation_error(exc) from exc


def to_validation_error(exc: PydanticValidationError) -> ValidationError:
    """Summarize a Pydantic error as a QuestCore ValidationError."""
    first = exc.errors()[0]
    field_names = [str(part) for part in first.get("loc", ()) if isinstance(part, str)]
    # The first loc entry of a discriminated union is the variant tag.
    field = field_names[-1] if field_names else None
    if field in GoalKind._value2member_map_:
        field = None
    return ValidationError(first.get("msg", "Invalid goal parameters."), field=field)
