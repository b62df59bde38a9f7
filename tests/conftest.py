# tests/conftest.py
"""
Shared fixtures for QuestCore tests.

Provides temporary goal files, file stores, and trackers pre-loaded with
the standard two-goal scenario.
"""

import sys
from pathlib import Path

import pytest

# Add source to path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def tmp_goals_path(tmp_path):
    """Temporary path for the goal file."""
    return tmp_path / "goals.txt"


@pytest.fixture
def file_store(tmp_goals_path):
    """Create a GoalFileStore with temporary storage."""
    from questcore.goals.store import GoalFileStore

    return GoalFileStore(tmp_goals_path)


@pytest.fixture
def tracker():
    """An empty GoalTracker without storage."""
    from questcore.goals.tracker import GoalTracker

    return GoalTracker()


@pytest.fixture
def scenario_tracker(tracker):
    """
    Tracker with Simple "A" (100) and Checklist "B" (50, 3 times, 500 bonus),
    B recorded three times and A once: score 750.
    """
    tracker.create_goal("simple", "A", "desc", 100)
    tracker.create_goal("checklist", "B", "desc", 50, times_required=3, bonus_points=500)
    for number in (2, 2, 2, 1):
        tracker.record_event(number)
    return tracker
