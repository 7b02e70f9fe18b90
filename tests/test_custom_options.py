import datetime as dt
import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("ANTHROPIC_API_KEY", "test-key")

from custom_options import (  # noqa: E402
    ALWAYS_AVAILABLE_ELEMENTS,
    FOCUS_OPTIONS,
    NEUTRAL_FOCUS_ID,
    DateWindow,
    available_elements,
    available_elements_by_id,
    get_focus,
)


def test_same_month_window_is_inclusive():
    window = DateWindow(start_month=2, start_day=1, end_month=2, end_day=14)
    assert window.contains(dt.date(2025, 2, 1))
    assert window.contains(dt.date(2025, 2, 14))
    assert not window.contains(dt.date(2025, 2, 15))
    assert not window.contains(dt.date(2025, 3, 5))


def test_cross_month_window():
    window = DateWindow(start_month=3, start_day=15, end_month=4, end_day=30)
    assert not window.contains(dt.date(2025, 3, 14))
    assert window.contains(dt.date(2025, 3, 15))
    assert window.contains(dt.date(2025, 4, 10))
    assert not window.contains(dt.date(2025, 5, 1))


def test_seasonal_element_follows_the_calendar():
    assert "cupid-revenge" in available_elements_by_id(dt.date(2025, 2, 10))
    assert "cupid-revenge" not in available_elements_by_id(dt.date(2025, 3, 10))


def test_always_available_elements_are_offered_every_day():
    always = {e.id for e in ALWAYS_AVAILABLE_ELEMENTS}
    for day in (dt.date(2025, 1, 1), dt.date(2025, 6, 30), dt.date(2025, 12, 31)):
        ids = {e.id for e in available_elements(day)}
        assert always <= ids


def test_no_limited_elements_in_early_june():
    ids = [e.id for e in available_elements(dt.date(2025, 6, 5))]
    assert ids == [e.id for e in ALWAYS_AVAILABLE_ELEMENTS]


def test_focus_catalog():
    assert FOCUS_OPTIONS[0].id == NEUTRAL_FOCUS_ID
    assert get_focus(NEUTRAL_FOCUS_ID).prompt_text == ""
    assert "animals" in get_focus("blame-animals").prompt_text
    assert get_focus("blame-the-cat") is None
