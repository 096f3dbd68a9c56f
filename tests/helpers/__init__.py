"""Shared constants and helpers for the event backend tests."""

PARTICIPANT_TABLE = "test_participants"
ANNOUNCEMENT_TABLE = "test_announcements"
SCHEDULE_TABLE = "test_schedules"


def timestamps(*values):
    """Return a side_effect callable yielding the given timestamps in order."""
    iterator = iter(values)
    return lambda: next(iterator)
