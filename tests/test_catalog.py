"""Test the question catalog."""
from __future__ import annotations

import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from core.catalog import CATALOG_LENGTH, QUESTIONS, Question, catalog_as_list, catalog_fingerprint


def test_catalog_has_twenty_questions():
    """The instrument is fixed at 20 items."""
    assert CATALOG_LENGTH == 20
    assert len(QUESTIONS) == 20


def test_positions_match_order():
    """Positions are 0-based and follow catalog order."""
    assert [q.position for q in QUESTIONS] == list(range(20))
    assert QUESTIONS[0].number == 1
    assert QUESTIONS[19].number == 20


def test_polarities():
    """Reverse-keyed items score on "no"."""
    reverse_keyed = [q.number for q in QUESTIONS if not q.polarity]
    assert reverse_keyed == [4, 5, 7, 9, 13, 15, 17]


def test_fingerprint_is_stable():
    assert catalog_fingerprint() == catalog_fingerprint(QUESTIONS)
    assert len(catalog_fingerprint()) == 8


def test_fingerprint_changes_with_order():
    """Reordering the catalog must change the fingerprint."""
    swapped = list(QUESTIONS)
    swapped[0], swapped[1] = (
        Question(position=0, text=QUESTIONS[1].text, polarity=QUESTIONS[1].polarity),
        Question(position=1, text=QUESTIONS[0].text, polarity=QUESTIONS[0].polarity),
    )
    assert catalog_fingerprint(swapped) != catalog_fingerprint()


def test_fingerprint_changes_with_polarity():
    flipped = list(QUESTIONS)
    flipped[3] = Question(position=3, text=QUESTIONS[3].text, polarity=not QUESTIONS[3].polarity)
    assert catalog_fingerprint(flipped) != catalog_fingerprint()


def test_catalog_as_list():
    items = catalog_as_list()
    assert items[0] == {
        "position": 0,
        "number": 1,
        "text": QUESTIONS[0].text,
        "polarity": True,
    }
