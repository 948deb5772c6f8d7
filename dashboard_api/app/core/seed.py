"""
Demo data for a fresh dashboard.

``seed_demo_data`` inserts one user and a representative row for every
entity kind so the front end has something to show on first load.
The store works the same without it.
"""

import logging

from .scoping import today as current_day
from .store import DashboardStore


logger = logging.getLogger(__name__)


def seed_demo_data(store: DashboardStore, user_id: str, today: str | None = None) -> None:
    """Populate ``store`` with sample rows for ``user_id`` on ``today``."""
    day = today or current_day()

    store.users.create({"name": "Alex", "email": "alex@example.com"}, record_id=user_id)
    store.settings.create({"user_id": user_id, "user_name": "Alex"})

    store.schedule_events.create(
        {"user_id": user_id, "title": "Team meeting", "time": "10:00", "date": day}
    )
    store.habits.create(
        {"user_id": user_id, "name": "Morning meditation", "icon": "🧘", "streak": 3}
    )
    store.quick_links.create(
        {"user_id": user_id, "name": "Gmail", "url": "https://gmail.com", "icon": "📧", "order": 0}
    )
    store.daily_summaries.create(
        {
            "user_id": user_id,
            "date": day,
            "tasks_completed": 2,
            "total_tasks": 5,
            "focus_time_minutes": 75,
            "habits_completed": 3,
            "total_habits": 4,
            "productivity_score": 78,
        }
    )
    store.daily_books.create(
        {
            "user_id": user_id,
            "date": day,
            "title": "Atomic Habits",
            "author": "James Clear",
            "summary": (
                "A practical guide to building good habits and breaking bad ones "
                "through small, consistent changes."
            ),
            "key_takeaway": "Focus on systems rather than goals. Small improvements compound over time.",
            "genre": "Self-Help",
            "cover_url": "https://images.unsplash.com/photo-1544716278-ca5e3f4abd8c?w=200&h=300&fit=crop",
        }
    )

    for domain, title, minutes, visits, category in (
        ("youtube.com", "YouTube", 45, 8, "entertainment"),
        ("github.com", "GitHub", 120, 15, "work"),
        ("twitter.com", "Twitter", 25, 12, "social"),
    ):
        store.website_usage.create(
            {
                "user_id": user_id,
                "date": day,
                "domain": domain,
                "title": title,
                "time_spent_minutes": minutes,
                "visit_count": visits,
                "category": category,
            }
        )

    for insight, category, severity, actionable in (
        (
            "You spent 45 minutes on YouTube today, which is 30% of your focus time. "
            "Consider using a website blocker during work hours.",
            "focus",
            "warning",
            True,
        ),
        (
            "Great job maintaining a 3-day meditation streak! "
            "Consistency is key to building lasting habits.",
            "habits",
            "info",
            False,
        ),
        (
            "Your productivity score is 78% today. You're on track to meet your weekly goals!",
            "productivity",
            "info",
            False,
        ),
    ):
        store.ai_insights.create(
            {
                "user_id": user_id,
                "date": day,
                "insight": insight,
                "category": category,
                "severity": severity,
                "actionable": actionable,
            }
        )

    logger.info("Seeded demo data for user %s on %s", user_id, day)
