from mlvisio_track.attendance.streak import calculate_streak


def test_streak_counts_leading_present_days():
    history = [("2024-05-03", "Present"), ("2024-05-02", "Present"), ("2024-05-01", "Absent")]
    assert calculate_streak(history) == 2


def test_streak_is_zero_when_latest_is_not_present():
    assert calculate_streak([("2024-05-03", "Late"), ("2024-05-02", "Present")]) == 0
    assert calculate_streak([("2024-05-03", "Absent")]) == 0


def test_streak_stops_at_gap_and_does_not_resume():
    history = [
        ("2024-05-10", "Present"),
        ("2024-05-09", "Present"),
        ("2024-05-07", "Present"),
        ("2024-05-06", "Present"),
    ]
    assert calculate_streak(history) == 2


def test_streak_crosses_month_boundary():
    history = [("2024-03-01", "Present"), ("2024-02-29", "Present"), ("2024-02-28", "Present")]
    assert calculate_streak(history) == 3


def test_same_day_duplicate_ends_streak():
    history = [("2024-05-03", "Present"), ("2024-05-03", "Present"), ("2024-05-02", "Present")]
    assert calculate_streak(history) == 1


def test_empty_history_and_unparsable_dates():
    assert calculate_streak([]) == 0
    assert calculate_streak([("2024-05-03", "Present"), ("not-a-date", "Present")]) == 1
