from datetime import date

import pytest

from naturaliza.domain import SearchDate


@pytest.mark.parametrize("raw", ["10-05-2024", "01-01-1999", "31-02-2030", "99-99-0000"])
def test_normalize_keeps_well_formed_dates(raw):
    assert SearchDate.normalize(raw, today=date(2024, 1, 5)).value == raw


@pytest.mark.parametrize(
    "raw",
    [None, "", "2024-05-10", "1-5-2024", "10/05/2024", "10-05-2024\n", " 10-05-2024", "hoje"],
)
def test_normalize_replaces_malformed_input_with_today(raw):
    assert SearchDate.normalize(raw, today=date(2024, 1, 5)).value == "05-01-2024"


def test_normalize_uses_local_clock_by_default():
    expected = date.today().strftime("%d-%m-%Y")
    assert SearchDate.normalize("amanhã").value == expected


def test_normalize_is_idempotent():
    first = SearchDate.normalize(None, today=date(2023, 12, 25))
    assert SearchDate.normalize(first.value) == first
    assert str(first) == "25-12-2023"
