import pytest

from src.trainee_attendance.trainee_attendance.attendance.status import normalise_status
from src.trainee_attendance.trainee_attendance.core.enums import AttendanceStatus


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("present", AttendanceStatus.PRESENT),
        ("Present", AttendanceStatus.PRESENT),
        ("LATE", AttendanceStatus.LATE),
        ("absent", AttendanceStatus.ABSENT),
        (AttendanceStatus.LATE, AttendanceStatus.LATE),
    ],
)
def test_known_statuses_are_normalised(raw, expected):
    assert normalise_status(raw) is expected


@pytest.mark.parametrize("raw", [None, "", "excused", "presen", 0])
def test_unknown_statuses_become_none(raw):
    assert normalise_status(raw) is None


def test_status_compares_equal_to_plain_string():
    assert normalise_status("Late") == "late"
