# src/questcore/goals/codec.py
"""
Line-oriented text encoding for goals and tracker state.

Format::

    <score>
    SimpleGoal|<name>|<description>|<points>|<True|False>
    EternalGoal|<name>|<description>|<points>
    ChecklistGoal|<name>|<description>|<points>|<done>|<required>|<bonus>

The first line holds the score; each following line is one goal, in
tracker order. Decoding is strict: a record must carry exactly the field
count its tag calls for, and every value must pass the same validation as
a goal created through the tracker.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Callable, Dict, Iterable, List, Optional, TextIO, Tuple

from ..exceptions import FormatError, UnknownVariantError, ValidationError
from .models import (
    FIELD_DELIMITER,
    ChecklistGoal,
    EternalGoal,
    Goal,
    GoalKind,
    SimpleGoal,
)

if TYPE_CHECKING:
    from .tracker import GoalTracker

logger = logging.getLogger(__name__)

_SCORE_PATTERN = re.compile(r"[0-9]+")
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_BOOL_VALUES = {"true": True, "false": False}


# =============================================================================
# Field parsers
# =============================================================================


def _parse_int(value: str, field: str, line_number: Optional[int]) -> int:
    if not _INT_PATTERN.fullmatch(value):
        raise FormatError(f"Field '{field}' is not an integer: {value!r}.", line_number)
    return int(value)


def _parse_bool(value: str, field: str, line_number: Optional[int]) -> bool:
    try:
        return _BOOL_VALUES[value.lower()]
    except KeyError:
        raise FormatError(
            f"Field '{field}' is not True or False: {value!r}.", line_number
        ) from None


# =============================================================================
# Per-variant decoders
# =============================================================================


def _decode_simple(fields: List[str], line_number: Optional[int]) -> SimpleGoal:
    _, name, description, points, completed = fields
    return SimpleGoal(
        name=name,
        description=description,
        point_value=_parse_int(points, "point_value", line_number),
        completed=_parse_bool(completed, "completed", line_number),
    )


def _decode_eternal(fields: List[str], line_number: Optional[int]) -> EternalGoal:
    _, name, description, points = fields
    return EternalGoal(
        name=name,
        description=description,
        point_value=_parse_int(points, "point_value", line_number),
    )


def _decode_checklist(fields: List[str], line_number: Optional[int]) -> ChecklistGoal:
    _, name, description, points, done, required, bonus = fields
    return ChecklistGoal(
        name=name,
        description=description,
        point_value=_parse_int(points, "point_value", line_number),
        times_completed=_parse_int(done, "times_completed", line_number),
        times_required=_parse_int(required, "times_required", line_number),
        bonus_points=_parse_int(bonus, "bonus_points", line_number),
    )


# Tag -> (field count including the tag, decoder)
_DECODERS: Dict[str, Tuple[int, Callable[[List[str], Optional[int]], Goal]]] = {
    GoalKind.SIMPLE.value: (5, _decode_simple),
    GoalKind.ETERNAL.value: (4, _decode_eternal),
    GoalKind.CHECKLIST.value: (7, _decode_checklist),
}


# =============================================================================
# Public API
# =============================================================================


def encode_goal(goal: Goal) -> str:
    """Encode one goal as a single record line (no trailing newline)."""
    return goal.encode()


def decode_goal(line: str, line_number: Optional[int] = None) -> Goal:
    """
    Rebuild a goal from one record line.

    Args:
        line: The record, without its line terminator.
        line_number: 1-based position in the source, used in error messages.

    Raises:
        UnknownVariantError: If the tag is not a known variant.
        FormatError: If the field count, a field value, or a goal rule
            (such as times_completed <= times_required) is violated.
    """
    fields = line.split(FIELD_DELIMITER)
    tag = fields[0]
    entry = _DECODERS.get(tag)
    if entry is None:
        raise UnknownVariantError(tag, line_number=line_number)

    expected, decoder = entry
    if len(fields) != expected:
        raise FormatError(
            f"{tag} record needs {expected} fields, found {len(fields)}.", line_number
        )

    try:
        return decoder(fields, line_number)
    except ValidationError as exc:
        raise FormatError(f"Invalid {tag} record ({exc}).", line_number) from exc


def encode_tracker(score: int, goals: Iterable[Goal]) -> str:
    """Encode a score and goal sequence as a complete text blob."""
    lines = [str(score)]
    lines.extend(encode_goal(goal) for goal in goals)
    return "\n".join(lines) + "\n"


def decode_tracker(text: str) -> Tuple[int, List[Goal]]:
    """
    Parse a complete text blob into a score and goal list.

    Nothing is returned unless every line parses, so a caller that only
    commits the result can never end up half-loaded.

    Raises:
        FormatError: On an empty blob, a bad score line, a blank record line,
            or any malformed record.
        UnknownVariantError: On a record with an unrecognized tag.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    if not lines:
        raise FormatError("No score line found.", line_number=1)

    score_line = lines[0].rstrip("\r")
    if not _SCORE_PATTERN.fullmatch(score_line):
        raise FormatError(f"Score is not a non-negative integer: {score_line!r}.", line_number=1)
    score = int(score_line)

    goals: List[Goal] = []
    for line_number, raw in enumerate(lines[1:], start=2):
        line = raw.rstrip("\r")
        if not line:
            raise FormatError("Empty goal record.", line_number)
        goals.append(decode_goal(line, line_number))

    logger.debug("Decoded score %d and %d goals", score, len(goals))
    return score, goals


def dump(tracker: GoalTracker, fp: TextIO) -> None:
    """Write the tracker's serialized state to a text stream."""
    fp.write(tracker.serialize())


def load(tracker: GoalTracker, fp: TextIO) -> None:
    """Replace the tracker's state with the contents of a text stream."""
    tracker.deserialize(fp.read())
