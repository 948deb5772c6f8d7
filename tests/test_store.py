import threading
from datetime import datetime

import pytest

from dashboard_api.app.core.scoping import owned_by, owned_on
from dashboard_api.app.core.store import DashboardStore


def _task(store, text, order=None, user_id="u1"):
    fields = {"user_id": user_id, "text": text}
    if order is not None:
        fields["order"] = order
    return store.tasks.create(fields)


class TestCreateAndGet:
    def test_create_assigns_id_and_timestamp(self):
        store = DashboardStore()
        task = _task(store, "Buy milk", 0)
        assert task.id
        assert isinstance(task.created_at, datetime)
        assert store.tasks.get(task.id) == task

    def test_ids_are_unique(self):
        store = DashboardStore()
        ids = {_task(store, f"t{i}").id for i in range(50)}
        assert len(ids) == 50

    def test_defaults_applied(self):
        store = DashboardStore()
        task = _task(store, "Buy milk")
        assert task.completed is False
        assert task.order == 0

    def test_none_treated_as_omitted(self):
        store = DashboardStore()
        habit = store.habits.create({"user_id": "u1", "name": "Read", "icon": None})
        assert habit.icon == "📝"

    def test_habit_defaults(self):
        store = DashboardStore()
        habit = store.habits.create({"user_id": "u1", "name": "Meditate", "icon": "🧘"})
        assert habit.streak == 0
        assert habit.last_completed == ""
        assert habit.icon == "🧘"

    def test_insight_defaults(self):
        store = DashboardStore()
        insight = store.ai_insights.create({"user_id": "u1", "date": "2024-01-01", "insight": "x"})
        assert insight.severity == "info"
        assert insight.actionable is False
        assert insight.category == "general"

    def test_usage_defaults(self):
        store = DashboardStore()
        usage = store.website_usage.create(
            {"user_id": "u1", "date": "2024-01-01", "domain": "a.com", "title": "A"}
        )
        assert usage.time_spent_minutes == 0
        assert usage.visit_count == 0
        assert usage.category == "other"

    def test_client_supplied_id_ignored(self):
        store = DashboardStore()
        task = store.tasks.create({"user_id": "u1", "text": "x", "id": "mine"})
        assert task.id != "mine"

    def test_get_missing_returns_none(self):
        assert DashboardStore().tasks.get("nope") is None

    def test_returned_records_are_copies(self):
        store = DashboardStore()
        task = _task(store, "Buy milk")
        task.text = "changed"
        assert store.tasks.get(task.id).text == "Buy milk"


class TestUpdate:
    def test_partial_update_keeps_other_fields(self):
        store = DashboardStore()
        task = _task(store, "Buy milk", 3)
        updated = store.tasks.update(task.id, {"completed": True})
        assert updated.completed is True
        assert updated.text == task.text
        assert updated.order == task.order
        assert updated.created_at == task.created_at

    def test_update_cannot_change_identity(self):
        store = DashboardStore()
        task = _task(store, "Buy milk")
        updated = store.tasks.update(task.id, {"id": "other", "user_id": "u2", "text": "Eggs"})
        assert updated.id == task.id
        assert updated.user_id == "u1"
        assert updated.text == "Eggs"

    def test_update_missing_returns_none(self):
        assert DashboardStore().tasks.update("nope", {"text": "x"}) is None

    def test_completed_toggles_both_ways(self):
        store = DashboardStore()
        task = _task(store, "Buy milk")
        store.tasks.update(task.id, {"completed": True})
        assert store.tasks.update(task.id, {"completed": False}).completed is False


class TestDelete:
    def test_delete_then_get(self):
        store = DashboardStore()
        task = _task(store, "Buy milk")
        assert store.tasks.delete(task.id) is True
        assert store.tasks.get(task.id) is None

    def test_delete_absent_returns_false(self):
        store = DashboardStore()
        task = _task(store, "Buy milk")
        store.tasks.delete(task.id)
        assert store.tasks.delete(task.id) is False


class TestOrdering:
    def test_tasks_by_order(self):
        store = DashboardStore()
        for order in (5, 1, 3, 1):
            _task(store, f"t{order}", order)
        orders = [t.order for t in store.tasks.list(owned_by("u1"))]
        assert orders == sorted(orders)

    def test_quick_links_by_order(self):
        store = DashboardStore()
        for order in (2, 0, 1):
            store.quick_links.create({"user_id": "u1", "name": "x", "url": "https://x", "order": order})
        assert [l.order for l in store.quick_links.list(owned_by("u1"))] == [0, 1, 2]

    def test_schedule_by_time(self):
        store = DashboardStore()
        for time in ("14:30", "09:00", "10:15"):
            store.schedule_events.create(
                {"user_id": "u1", "title": time, "time": time, "date": "2024-01-01"}
            )
        times = [e.time for e in store.schedule_events.list(owned_on("u1", "2024-01-01"))]
        assert times == ["09:00", "10:15", "14:30"]

    def test_usage_by_time_spent_descending(self):
        store = DashboardStore()
        for minutes in (10, 120, 45):
            store.website_usage.create(
                {
                    "user_id": "u1",
                    "date": "2024-01-01",
                    "domain": f"{minutes}.com",
                    "title": "x",
                    "time_spent_minutes": minutes,
                }
            )
        minutes = [u.time_spent_minutes for u in store.website_usage.list(owned_on("u1", "2024-01-01"))]
        assert minutes == [120, 45, 10]

    def test_insights_newest_first(self):
        store = DashboardStore()
        for i in range(5):
            store.ai_insights.create({"user_id": "u1", "date": "2024-01-01", "insight": str(i)})
        stamps = [i.created_at for i in store.ai_insights.list(owned_on("u1", "2024-01-01"))]
        assert stamps == sorted(stamps, reverse=True)

    def test_habits_oldest_first(self):
        store = DashboardStore()
        names = ["a", "b", "c"]
        for name in names:
            store.habits.create({"user_id": "u1", "name": name})
        assert [h.name for h in store.habits.list(owned_by("u1"))] == names


class TestScoping:
    def test_list_excludes_other_users(self):
        store = DashboardStore()
        _task(store, "mine", user_id="u1")
        _task(store, "theirs", user_id="u2")
        assert [t.text for t in store.tasks.list(owned_by("u1"))] == ["mine"]

    def test_list_excludes_other_days(self):
        store = DashboardStore()
        store.schedule_events.create({"user_id": "u1", "title": "x", "time": "10:00", "date": "2024-01-02"})
        assert store.schedule_events.list(owned_on("u1", "2024-01-01")) == []


class TestSingletons:
    def test_settings_upsert_keeps_one_record(self):
        store = DashboardStore()
        store.settings.create({"user_id": "u1", "user_name": "First"})
        store.settings.create({"user_id": "u1", "user_name": "Second"})
        assert len(store.settings) == 1
        assert store.settings.get("u1").user_name == "Second"

    def test_settings_defaults(self):
        store = DashboardStore()
        settings = store.settings.create({"user_id": "u1"})
        assert settings.user_name == "Friend"
        assert settings.daily_focus == ""

    def test_summary_slot_is_per_day(self):
        store = DashboardStore()
        store.daily_summaries.create({"user_id": "u1", "date": "2024-01-01", "total_tasks": 3})
        store.daily_summaries.create({"user_id": "u1", "date": "2024-01-01", "total_tasks": 7})
        store.daily_summaries.create({"user_id": "u1", "date": "2024-01-02"})
        assert len(store.daily_summaries) == 2
        summary = store.daily_summaries.get("u1-2024-01-01")
        assert summary.total_tasks == 7
        assert summary.productivity_score == 0

    def test_book_upsert_second_call_wins(self):
        store = DashboardStore()
        base = {"user_id": "u1", "date": "2024-01-01", "author": "A", "summary": "S", "key_takeaway": "K", "genre": "G"}
        store.daily_books.create({**base, "title": "One"})
        store.daily_books.create({**base, "title": "Two"})
        assert len(store.daily_books) == 1
        book = store.daily_books.get("u1-2024-01-01")
        assert book.title == "Two"
        assert book.cover_url is None

    def test_reset_clears_everything(self):
        store = DashboardStore()
        _task(store, "x")
        store.settings.create({"user_id": "u1"})
        store.reset()
        assert all(len(c) == 0 for c in store.collections())


class TestConcurrency:
    def test_parallel_creates_are_all_kept(self):
        store = DashboardStore()

        def worker(n):
            for i in range(50):
                _task(store, f"w{n}-{i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert len(store.tasks) == 400
        assert len(store.tasks.list(owned_by("u1"))) == 400


BOOK = {"author": "A", "summary": "S", "key_takeaway": "K", "genre": "G", "title": "T"}

# collection, create fields (owner added per test), key of the created record, single-field change
ENTITY_CASES = [
    ("users", {"name": "Sam", "email": "sam@example.com"}, None, {"name": "Samantha"}),
    ("tasks", {"text": "Buy milk"}, None, {"completed": True}),
    ("settings", {"user_name": "Sam"}, "u1", {"daily_focus": "Ship it"}),
    ("schedule_events", {"title": "Gym", "time": "18:00", "date": "2024-01-01"}, None, {"completed": True}),
    ("habits", {"name": "Read"}, None, {"streak": 4}),
    ("quick_links", {"name": "Docs", "url": "https://docs.python.org"}, None, {"order": 2}),
    ("daily_summaries", {"date": "2024-01-01"}, "u1-2024-01-01", {"total_tasks": 5}),
    ("daily_books", {"date": "2024-01-01", **BOOK}, "u1-2024-01-01", {"cover_url": "https://x/c.jpg"}),
    ("website_usage", {"date": "2024-01-01", "domain": "a.com", "title": "A"}, None, {"visit_count": 3}),
    ("ai_insights", {"date": "2024-01-01", "insight": "Rest"}, None, {"severity": "warning"}),
]


def _create(store, name, fields):
    collection = getattr(store, name)
    if "user_id" in collection.model.model_fields:
        fields = {**fields, "user_id": "u1"}
    return collection, collection.create(fields)


@pytest.mark.parametrize("name,fields,key,change", ENTITY_CASES, ids=[c[0] for c in ENTITY_CASES])
class TestEveryKind:
    def test_get_returns_created_record(self, name, fields, key, change):
        collection, record = _create(DashboardStore(), name, fields)
        assert collection.get(key or record.id) == record

    def test_single_field_update_leaves_rest_unchanged(self, name, fields, key, change):
        collection, record = _create(DashboardStore(), name, fields)
        updated = collection.update(key or record.id, change)
        assert updated.model_dump() == {**record.model_dump(), **change}
        assert collection.get(key or record.id) == updated

    def test_delete_then_get(self, name, fields, key, change):
        collection, record = _create(DashboardStore(), name, fields)
        assert collection.delete(key or record.id) is True
        assert collection.get(key or record.id) is None


@pytest.mark.parametrize(
    "name,fields",
    [
        ("schedule_events", {"title": "Gym", "time": "18:00"}),
        ("website_usage", {"domain": "a.com", "title": "A"}),
        ("ai_insights", {"insight": "Rest"}),
    ],
)
def test_dated_lists_exclude_other_users_and_days(name, fields):
    store = DashboardStore()
    collection = getattr(store, name)
    mine = collection.create({**fields, "user_id": "u1", "date": "2024-01-01"})
    collection.create({**fields, "user_id": "u2", "date": "2024-01-01"})
    collection.create({**fields, "user_id": "u1", "date": "2024-01-02"})
    assert [r.id for r in collection.list(owned_on("u1", "2024-01-01"))] == [mine.id]
