# tests/goals/test_goal_models.py
"""
Tests for the goal variants.

Covers:
- GoalKind aliases
- SimpleGoal, EternalGoal, ChecklistGoal reward state machines
- Status labels and record encoding
- Construction validation, immutable identity fields and progress state
"""

import pytest

from questcore.exceptions import ValidationError
from questcore.goals.models import (
    ChecklistGoal,
    EternalGoal,
    GoalKind,
    SimpleGoal,
    build_goal,
)

# =============================================================================
# GoalKind Tests
# =============================================================================


class TestGoalKind:
    """Tests for GoalKind lookup."""

    def test_values_are_persisted_tags(self):
        assert GoalKind.SIMPLE.value == "SimpleGoal"
        assert GoalKind.ETERNAL.value == "EternalGoal"
        assert GoalKind.CHECKLIST.value == "ChecklistGoal"

    @pytest.mark.parametrize(
        "alias, expected",
        [
            ("simple", GoalKind.SIMPLE),
            ("ETERNAL", GoalKind.ETERNAL),
            ("checklistgoal", GoalKind.CHECKLIST),
            (" Checklist ", GoalKind.CHECKLIST),
        ],
    )
    def test_aliases(self, alias, expected):
        """Short names and tags resolve case-insensitively."""
        assert GoalKind(alias) is expected

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            GoalKind("weekly")


# =============================================================================
# SimpleGoal Tests
# =============================================================================


class TestSimpleGoal:
    """Tests for the one-shot goal."""

    def test_defaults(self):
        goal = SimpleGoal(name="Marathon", description="Run a marathon", point_value=1000)
        assert goal.kind == "SimpleGoal"
        assert goal.completed is False
        assert goal.is_complete() is False

    def test_only_first_event_pays(self):
        """Exactly one event earns points; the goal stays complete."""
        goal = SimpleGoal(name="Marathon", description="Run a marathon", point_value=1000)
        assert goal.record_event() == 1000
        assert goal.is_complete() is True
        for _ in range(3):
            assert goal.record_event() == 0
            assert goal.is_complete() is True

    def test_zero_point_goal(self):
        goal = SimpleGoal(name="Free", description="No points", point_value=0)
        assert goal.record_event() == 0
        assert goal.is_complete() is True

    def test_status_label(self):
        goal = SimpleGoal(name="A", description="desc", point_value=10)
        assert goal.status_label() == "[ ]"
        goal.record_event()
        assert goal.status_label() == "[X]"

    def test_encode(self):
        goal = SimpleGoal(name="A", description="desc", point_value=100)
        assert goal.encode() == "SimpleGoal|A|desc|100|False"
        goal.record_event()
        assert goal.encode() == "SimpleGoal|A|desc|100|True"


# =============================================================================
# EternalGoal Tests
# =============================================================================


class TestEternalGoal:
    """Tests for the never-ending goal."""

    def test_every_event_pays(self):
        goal = EternalGoal(name="Scriptures", description="Read daily", point_value=100)
        assert [goal.record_event() for _ in range(5)] == [100] * 5

    def test_never_complete(self):
        goal = EternalGoal(name="Scriptures", description="Read daily", point_value=100)
        for _ in range(10):
            goal.record_event()
            assert goal.is_complete() is False

    def test_status_label(self):
        goal = EternalGoal(name="Scriptures", description="Read daily", point_value=100)
        assert goal.status_label() == "[∞]"

    def test_encode_has_no_extra_fields(self):
        goal = EternalGoal(name="Scriptures", description="Read daily", point_value=100)
        assert goal.encode() == "EternalGoal|Scriptures|Read daily|100"


# =============================================================================
# ChecklistGoal Tests
# =============================================================================


class TestChecklistGoal:
    """Tests for the repeat-N-times goal."""

    def _goal(self, required=3, points=50, bonus=500):
        return ChecklistGoal(
            name="Temple",
            description="Attend the temple",
            point_value=points,
            times_required=required,
            bonus_points=bonus,
        )

    def test_reward_sequence(self):
        """Events 1..N-1 pay P, event N pays P+B, later events pay 0."""
        goal = self._goal(required=3, points=50, bonus=500)
        assert [goal.record_event() for _ in range(5)] == [50, 50, 550, 0, 0]
        assert goal.times_completed == 3

    def test_completion_flips_on_last_event(self):
        goal = self._goal(required=3)
        goal.record_event()
        goal.record_event()
        assert goal.is_complete() is False
        goal.record_event()
        assert goal.is_complete() is True
        goal.record_event()
        assert goal.is_complete() is True

    def test_single_time_checklist(self):
        """A one-time checklist pays the bonus on its only event."""
        goal = self._goal(required=1, points=10, bonus=5)
        assert goal.record_event() == 15
        assert goal.record_event() == 0

    def test_status_label(self):
        goal = self._goal(required=5)
        assert goal.status_label() == "[ ] Completed 0/5 times"
        goal.record_event()
        goal.record_event()
        assert goal.status_label() == "[ ] Completed 2/5 times"
        for _ in range(3):
            goal.record_event()
        assert goal.status_label() == "[X] Completed 5/5 times"

    def test_encode(self):
        goal = self._goal(required=3, points=50, bonus=500)
        goal.record_event()
        assert goal.encode() == "ChecklistGoal|Temple|Attend the temple|50|1|3|500"

    def test_progress_cannot_exceed_required(self):
        with pytest.raises(ValidationError):
            ChecklistGoal(
                name="Temple",
                description="Attend",
                point_value=50,
                times_required=3,
                bonus_points=500,
                times_completed=4,
            )

    def test_zero_required_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            self._goal(required=0)
        assert exc_info.value.field == "times_required"


# =============================================================================
# Construction Tests
# =============================================================================


class TestBuildGoal:
    """Tests for build_goal validation."""

    def test_builds_each_variant(self):
        assert isinstance(build_goal("simple", name="a", description="b", point_value=1), SimpleGoal)
        assert isinstance(build_goal("eternal", name="a", description="b", point_value=1), EternalGoal)
        goal = build_goal(
            GoalKind.CHECKLIST,
            name="a",
            description="b",
            point_value=1,
            times_required=2,
            bonus_points=3,
        )
        assert isinstance(goal, ChecklistGoal)
        assert goal.times_completed == 0

    def test_negative_points(self):
        with pytest.raises(ValidationError) as exc_info:
            build_goal("simple", name="a", description="b", point_value=-1)
        assert exc_info.value.field == "point_value"

    @pytest.mark.parametrize("name", ["", "   ", "a|b", "line\nbreak", "cr\rhere"])
    def test_invalid_names(self, name):
        """Blank names and reserved characters are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            build_goal("eternal", name=name, description="b", point_value=1)
        assert exc_info.value.field == "name"

    def test_empty_description(self):
        with pytest.raises(ValidationError) as exc_info:
            build_goal("eternal", name="a", description="", point_value=1)
        assert exc_info.value.field == "description"

    def test_checklist_missing_times_required(self):
        with pytest.raises(ValidationError) as exc_info:
            build_goal("checklist", name="a", description="b", point_value=1, bonus_points=5)
        assert exc_info.value.field == "times_required"

    def test_checklist_missing_bonus(self):
        with pytest.raises(ValidationError) as exc_info:
            build_goal("checklist", name="a", description="b", point_value=1, times_required=2)
        assert exc_info.value.field == "bonus_points"

    def test_checklist_negative_bonus(self):
        with pytest.raises(ValidationError):
            build_goal(
                "checklist", name="a", description="b", point_value=1,
                times_required=2, bonus_points=-5,
            )

    def test_unexpected_parameter_for_variant(self):
        """Checklist-only fields are rejected on other variants."""
        with pytest.raises(ValidationError) as exc_info:
            build_goal("simple", name="a", description="b", point_value=1, times_required=2)
        assert exc_info.value.field == "times_required"

    def test_unknown_kind(self):
        with pytest.raises(ValidationError) as exc_info:
            build_goal("weekly", name="a", description="b", point_value=1)
        assert exc_info.value.field == "kind"

    def test_non_integer_points(self):
        with pytest.raises(ValidationError):
            build_goal("simple", name="a", description="b", point_value="10")
        with pytest.raises(ValidationError):
            build_goal("simple", name="a", description="b", point_value=True)


class TestImmutableFields:
    """Identity fields are fixed after construction."""

    @pytest.mark.parametrize("field, value", [("name", "B"), ("description", "x"), ("point_value", 5)])
    def test_identity_fields_frozen(self, field, value):
        goal = SimpleGoal(name="A", description="desc", point_value=100)
        with pytest.raises(ValidationError):
            setattr(goal, field, value)
        assert goal.name == "A"
        assert goal.point_value == 100

    def test_checklist_target_frozen(self):
        goal = ChecklistGoal(
            name="A", description="desc", point_value=1, times_required=3, bonus_points=0
        )
        with pytest.raises(ValidationError):
            goal.times_required = 10

    def test_kind_frozen(self):
        goal = EternalGoal(name="A", description="desc", point_value=1)
        with pytest.raises(ValidationError):
            goal.kind = "SimpleGoal"

    def test_direct_construction_raises_questcore_error(self):
        with pytest.raises(ValidationError) as exc_info:
            SimpleGoal(name="A", description="desc", point_value=-1)
        assert exc_info.value.field == "point_value"


class TestProgressState:
    """Progress only moves forward, and only through record_event."""

    def _checklist(self, **kwargs):
        return ChecklistGoal(
            name="B", description="desc", point_value=50, times_required=3, bonus_points=500,
            **kwargs,
        )

    def test_simple_completed_cannot_be_reset(self):
        goal = SimpleGoal(name="A", description="desc", point_value=100)
        assert goal.record_event() == 100
        with pytest.raises(ValidationError) as exc_info:
            goal.completed = False
        assert exc_info.value.field == "completed"
        assert goal.is_complete() is True
        assert goal.record_event() == 0

    def test_simple_completed_cannot_be_set_early(self):
        goal = SimpleGoal(name="A", description="desc", point_value=100)
        with pytest.raises(ValidationError):
            goal.completed = True
        assert goal.record_event() == 100

    def test_checklist_progress_cannot_be_rewound(self):
        goal = self._checklist()
        assert [goal.record_event() for _ in range(3)] == [50, 50, 550]
        with pytest.raises(ValidationError) as exc_info:
            goal.times_completed = 0
        assert exc_info.value.field == "times_completed"
        assert goal.times_completed == 3
        assert goal.record_event() == 0

    @pytest.mark.parametrize("value", [9, -1, 2])
    def test_rejected_assignment_keeps_old_value(self, value):
        goal = self._checklist()
        goal.record_event()
        with pytest.raises(ValidationError):
            goal.times_completed = value
        assert goal.times_completed == 1
        assert goal.encode() == "ChecklistGoal|B|desc|50|1|3|500"

    def test_restored_progress_is_accepted(self):
        goal = self._checklist(times_completed=2)
        assert goal.record_event() == 550
        assert goal.is_complete() is True
