# examples/eternal_quest.py
"""
Example demonstrating goal tracking and persistence with QuestCore.

This script shows how to:
1. Load configuration and set up logging.
2. Create one goal of each variant.
3. Record events and watch the score grow.
4. Save the tracker to its goal file and load it back into a fresh tracker.

To run this example:
- Install questcore (`pip install .` from the project root).
- Optionally point the goal file elsewhere:
  `export QUESTCORE__STORAGE__PATH=/tmp/my_goals.txt`
"""

import logging

from questcore import GoalTracker, QuestCoreError, configure_logging, load_config

logger = logging.getLogger("questcore.examples")


def main():
    """Runs the goal tracking example."""
    config = load_config()
    configure_logging(app_name="eternal_quest", config=config.logging.model_dump())

    tracker = GoalTracker.from_config(config)
    try:
        tracker.create_goal("simple", "Marathon", "Run a marathon", 1000)
        tracker.create_goal("eternal", "Scriptures", "Read scriptures", 100)
        tracker.create_goal(
            "checklist", "Temple", "Attend the temple", 50,
            times_required=3, bonus_points=500,
        )

        for number in (3, 2, 3, 3, 1, 1):
            event = tracker.record_event(number)
            print(f"+{event.points_earned} for '{event.goal.name}' (score {event.total_score})")

        for listing in tracker.list_goals():
            print(f"{listing.number}. {listing.status_label} {listing.name} ({listing.description})")

        tracker.save()

        restored = GoalTracker.from_config(config)
        restored.load()
        print(f"Restored score: {restored.current_score()}")
    except QuestCoreError as e:
        logger.error("Eternal Quest example failed: %s", e)
        raise


if __name__ == "__main__":
    main()
