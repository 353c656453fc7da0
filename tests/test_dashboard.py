"""Test the Streamlit dashboard with Streamlit's app testing harness."""
from __future__ import annotations

import sys
from pathlib import Path

from streamlit.testing.v1 import AppTest

# Add src to path
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from domain import share_token

APP_FILE = str(src_path / "dashboard" / "streamlit_app.py")


def test_fresh_survey_renders_questions():
    at = AppTest.from_file(APP_FILE).run()
    assert not at.exception
    assert len(at.radio) == 20
    assert not any(radio.disabled for radio in at.radio)


def test_shared_link_opens_locked(make_answers):
    at = AppTest.from_file(APP_FILE)
    at.query_params["r"] = share_token.encode(make_answers(15))
    at.run()
    assert not at.exception
    assert all(radio.disabled for radio in at.radio)
    assert any("Score: 15 points" in header.value for header in at.subheader)


def test_malformed_link_starts_fresh():
    at = AppTest.from_file(APP_FILE)
    at.query_params["r"] = "not-valid-base64!!"
    at.run()
    assert not at.exception
    assert not any(radio.disabled for radio in at.radio)
