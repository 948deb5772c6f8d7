from dashboard_api.app.core.scoping import owned_by, owned_on
from dashboard_api.app.core.seed import seed_demo_data
from dashboard_api.app.core.store import DashboardStore

DAY = "2024-03-10"


def _seeded():
    store = DashboardStore()
    seed_demo_data(store, "default-user", DAY)
    return store


def test_every_kind_has_rows():
    store = _seeded()
    for collection in store.collections():
        if collection.name == "task":
            continue
        assert len(collection) > 0, collection.name
    assert len(store.tasks) == 0


def test_demo_user_has_fixed_id():
    store = _seeded()
    user = store.users.get("default-user")
    assert user.name == "Alex"
    assert user.email == "alex@example.com"


def test_settings_and_singletons():
    store = _seeded()
    assert store.settings.get("default-user").user_name == "Alex"
    assert store.daily_summaries.get(f"default-user-{DAY}").productivity_score == 78
    assert store.daily_books.get(f"default-user-{DAY}").title == "Atomic Habits"


def test_habit_has_streak():
    store = _seeded()
    (habit,) = store.habits.list(owned_by("default-user"))
    assert habit.streak > 0


def test_usage_spans_categories():
    store = _seeded()
    usage = store.website_usage.list(owned_on("default-user", DAY))
    assert len(usage) == 3
    assert len({u.category for u in usage}) == 3
    assert usage[0].domain == "github.com"


def test_insight_severities():
    store = _seeded()
    insights = store.ai_insights.list(owned_on("default-user", DAY))
    assert len(insights) == 3
    assert {i.severity for i in insights} == {"info", "warning"}
