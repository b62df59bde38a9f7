# src/questcore/goals/tracker.py
"""
Goal tracker: an ordered goal list plus the running score.

Example:
    from questcore.goals import GoalTracker

    tracker = GoalTracker()
    tracker.create_goal("simple", "Marathon", "Run a marathon", 1000)
    tracker.create_goal("checklist", "Temple", "Attend the temple", 50,
                        times_required=10, bonus_points=500)

    event = tracker.record_event(2)
    print(event.points_earned, event.total_score)   # 50 50

    for listing in tracker.list_goals():
        print(f"{listing.number}. {listing.status_label} {listing.name} ({listing.description})")

    text = tracker.serialize()
    restored = GoalTracker()
    restored.deserialize(text)
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Iterator, List, NamedTuple, Optional, Tuple

from ..exceptions import IndexOutOfRangeError, StorageError
from ..logging_config import log_display
from .codec import decode_tracker, encode_tracker
from .models import Goal, GoalKind, build_goal
from .store import GoalFileStore, GoalStorageProtocol

logger = logging.getLogger(__name__)


# =============================================================================
# Result types
# =============================================================================


class GoalListing(NamedTuple):
    """One row of a goal listing."""

    number: int
    status_label: str
    name: str
    description: str


@dataclass(frozen=True)
class RecordedEvent:
    """
    Outcome of recording an event against a goal.

    Attributes:
        goal: The goal the event was recorded against.
        points_earned: Points this event awarded (0 if the goal was done).
        total_score: Tracker score after the event.
    """

    goal: Goal
    points_earned: int
    total_score: int


class GoalListView:
    """
    Lazy, restartable view over a tracker's goals.

    Each iteration walks the goals held at the moment iteration starts, so a
    load during iteration does not disturb a listing already in progress.
    """

    def __init__(self, tracker: GoalTracker) -> None:
        self._tracker = tracker

    def __iter__(self) -> Iterator[GoalListing]:
        for number, goal in enumerate(self._tracker.goals, start=1):
            yield GoalListing(number, goal.status_label(), goal.name, goal.description)

    def __len__(self) -> int:
        return len(self._tracker)


# =============================================================================
# Tracker
# =============================================================================


class GoalTracker:
    """
    Owns the goals and the score.

    Goals are addressed by their 1-based number, i.e. their position in
    insertion order as shown by :meth:`list_goals`.

    The score only ever grows through :meth:`record_event`; the only other
    way to change it is to replace the whole state with :meth:`deserialize`
    or :meth:`load`, which swap goals and score together or not at all.

    Thread Safety:
        All operations hold one re-entrant lock, so goals and score are
        always observed and replaced together.

    Args:
        storage: Optional backend used by :meth:`save` and :meth:`load`.
    """

    def __init__(self, storage: Optional[GoalStorageProtocol] = None) -> None:
        self.storage = storage
        self._goals: List[Goal] = []
        self._score = 0
        self._lock = threading.RLock()

    # ----- factory ------------------------------------------------------------

    @classmethod
    def from_config(
        cls,
        config: Any,
        storage: Optional[GoalStorageProtocol] = None,
    ) -> GoalTracker:
        """
        Create a tracker from a QuestCoreConfig.

        Args:
            config: A QuestCoreConfig instance.
            storage: Optional storage override (default: GoalFileStore from config).

        Example:
            >>> from questcore.config import load_config
            >>> tracker = GoalTracker.from_config(load_config())
            >>> tracker.load()
        """
        if storage is None:
            storage = GoalFileStore(
                path=config.storage.path,
                encoding=config.storage.encoding,
            )
        return cls(storage=storage)

    # ----- accessors ----------------------------------------------------------

    @property
    def goals(self) -> Tuple[Goal, ...]:
        with self._lock:
            return tuple(self._goals)

    @property
    def score(self) -> int:
        return self._score

    def current_score(self) -> int:
        return self._score

    def __len__(self) -> int:
        return len(self._goals)

    def get_goal(self, number: int) -> Goal:
        """Return the goal with the given 1-based number."""
        with self._lock:
            return self._goals[self._checked_position(number)]

    def _checked_position(self, number: Any) -> int:
        # bool is an int subclass but never a valid goal number
        if isinstance(number, bool) or not isinstance(number, int):
            raise IndexOutOfRangeError(number, len(self._goals))
        if not 1 <= number <= len(self._goals):
            raise IndexOutOfRangeError(number, len(self._goals))
        return number - 1

    # ----- operations ---------------------------------------------------------

    def create_goal(
        self,
        kind: GoalKind | str,
        name: str,
        description: str,
        point_value: int,
        times_required: Optional[int] = None,
        bonus_points: Optional[int] = None,
    ) -> Goal:
        """
        Create a goal and append it to the tracker.

        Args:
            kind: Variant (GoalKind, persisted tag, or "simple"/"eternal"/"checklist").
            name: Short name.
            description: Description.
            point_value: Points per qualifying event.
            times_required: Checklist only, events needed to complete.
            bonus_points: Checklist only, bonus on the completing event.

        Returns:
            The created goal.

        Raises:
            ValidationError: If parameters are missing, unexpected for the
                variant, or invalid. The tracker is left unchanged.
        """
        params = {"name": name, "description": description, "point_value": point_value}
        if times_required is not None:
            params["times_required"] = times_required
        if bonus_points is not None:
            params["bonus_points"] = bonus_points

        goal = build_goal(kind, **params)
        with self._lock:
            self._goals.append(goal)
            count = len(self._goals)
        logger.debug("Created %s #%d: %s", goal.kind, count, goal.name)
        return goal

    def list_goals(self) -> GoalListView:
        """Return a lazy listing of (number, status label, name, description)."""
        return GoalListView(self)

    def record_event(self, number: int) -> RecordedEvent:
        """
        Record one qualifying event against goal ``number``.

        Raises:
            IndexOutOfRangeError: If ``number`` is not a current goal number.
                The score is left unchanged.
        """
        with self._lock:
            goal = self._goals[self._checked_position(number)]
            points = goal.record_event()
            self._score += points
            total = self._score
        logger.info("Recorded event on '%s': +%d (score %d)", goal.name, points, total)
        return RecordedEvent(goal=goal, points_earned=points, total_score=total)

    # ----- serialization ------------------------------------------------------

    def serialize(self) -> str:
        """Encode the score and all goals as text (score line first)."""
        with self._lock:
            return encode_tracker(self._score, self._goals)

    def deserialize(self, text: str) -> None:
        """
        Replace all state with the contents of ``text``.

        The text is parsed in full before anything is replaced; on any error
        the tracker keeps its previous goals and score.

        Raises:
            FormatError: On a malformed score or goal record.
            UnknownVariantError: On an unrecognized goal tag.
        """
        score, goals = decode_tracker(text)
        with self._lock:
            self._goals = goals
            self._score = score
        logger.debug("Tracker state replaced: score %d, %d goals", score, len(goals))

    # ----- persistence --------------------------------------------------------

    def save(self) -> None:
        """Write the current state to the storage backend."""
        storage = self._require_storage()
        with self._lock:
            storage.write_text(self.serialize())
            count = len(self._goals)
        log_display(logger, logging.INFO, "Saved %d goals to %s", count, storage)

    def load(self) -> bool:
        """
        Replace the current state with the one held by the storage backend.

        Returns:
            False if the backend holds nothing yet (the tracker is untouched),
            True once the state has been loaded.

        Raises:
            StorageError: If no backend is configured or it cannot be read.
            FormatError: If the stored text is malformed; the tracker is untouched.
        """
        storage = self._require_storage()
        with self._lock:
            if not storage.exists():
                logger.warning("No saved goals found at %s", storage)
                return False
            self.deserialize(storage.read_text())
            count = len(self._goals)
        log_display(logger, logging.INFO, "Loaded %d goals from %s", count, storage)
        return True

    def _require_storage(self) -> GoalStorageProtocol:
        if self.storage is None:
            raise StorageError("No storage backend configured for this tracker.")
        return self.storage

    def __repr__(self) -> str:
        return f"GoalTracker(goals={len(self._goals)}, score={self._score})"

