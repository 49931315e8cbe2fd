"""Unit tests for the canned writing hints."""

from easylog.application.services import suggest
from easylog.application.services.suggestion_service import (
    CUSTOMER_HINT,
    GENERIC_HINT,
    SERVER_HINT,
)


def test_short_drafts_get_no_hint():
    assert suggest("") is None
    assert suggest("0123456789") is None


def test_generic_hint_after_threshold():
    assert suggest("01234567890") == GENERIC_HINT


def test_server_keyword():
    assert suggest("Server neu gestartet") == SERVER_HINT


def test_customer_keyword():
    assert suggest("Kunde hat angerufen") == CUSTOMER_HINT


def test_server_wins_over_customer():
    assert suggest("Kunde meldet Server down") == SERVER_HINT


def test_keywords_are_case_sensitive():
    assert suggest("server neu gestartet") == GENERIC_HINT


def test_custom_threshold():
    assert suggest("Server", min_length=3) == SERVER_HINT
