import re
from types import SimpleNamespace

from dashboard_api.app.core.scoping import owned_by, owned_on, scope_key, today


def test_scope_key_user_only():
    assert scope_key("default-user") == "default-user"


def test_scope_key_user_and_date():
    assert scope_key("default-user", "2024-01-01") == "default-user-2024-01-01"


def test_owned_by():
    pred = owned_by("u1")
    assert pred(SimpleNamespace(user_id="u1"))
    assert not pred(SimpleNamespace(user_id="u2"))


def test_owned_on_requires_both():
    pred = owned_on("u1", "2024-01-01")
    assert pred(SimpleNamespace(user_id="u1", date="2024-01-01"))
    assert not pred(SimpleNamespace(user_id="u1", date="2024-01-02"))
    assert not pred(SimpleNamespace(user_id="u2", date="2024-01-01"))


def test_dates_are_not_parsed():
    # any token works; equality is all that matters
    pred = owned_on("u1", "not-a-date")
    assert pred(SimpleNamespace(user_id="u1", date="not-a-date"))


def test_today_format():
    assert re.match(r"^\d{4}-\d{2}-\d{2}$", today())
