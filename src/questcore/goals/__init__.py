# src/questcore/goals/__init__.py
"""
Goal tracking and persistence.

- Goal variants: SimpleGoal, EternalGoal, ChecklistGoal (see models)
- GoalTracker: ordered goals plus running score (see tracker)
- Text codec for saving and restoring tracker state (see codec)
- GoalFileStore: file backend for GoalTracker.save/load (see store)

Example:
    from questcore.goals import GoalTracker, GoalFileStore

    tracker = GoalTracker(storage=GoalFileStore("~/goals.txt"))
    tracker.create_goal("eternal", "Scriptures", "Read scriptures", 100)
    tracker.record_event(1)
    tracker.save()
"""

from .codec import decode_goal, decode_tracker, dump, encode_goal, encode_tracker, load
from .models import (
    FIELD_DELIMITER,
    GOAL_TYPES,
    ChecklistGoal,
    EternalGoal,
    Goal,
    GoalKind,
    SimpleGoal,
    build_goal,
)
from .store import GoalFileStore, GoalStorageProtocol
from .tracker import GoalListing, GoalListView, GoalTracker, RecordedEvent

__all__ = [
    "FIELD_DELIMITER",
    "GOAL_TYPES",
    "ChecklistGoal",
    "EternalGoal",
    "Goal",
    "GoalFileStore",
    "GoalKind",
    "GoalListView",
    "GoalListing",
    "GoalStorageProtocol",
    "GoalTracker",
    "RecordedEvent",
    "SimpleGoal",
    "build_goal",
    "decode_goal",
    "decode_tracker",
    "dump",
    "encode_goal",
    "encode_tracker",
    "load",
]
