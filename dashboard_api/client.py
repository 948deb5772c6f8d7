"""Daily Dashboard API client.

A thin wrapper around the dashboard's REST API for scripts and other
Python consumers (for example a job that imports browser history as
website usage rows).  It uses the ``requests`` library internally.

Every method returns a tuple ``(data, error)``.  On success ``data``
holds the decoded JSON body and ``error`` is ``None``; on failure
``data`` is ``None`` (or an empty list for listings) and ``error`` is
a dictionary with ``status_code`` and ``message`` keys.  Methods never
raise for HTTP or network failures.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]
Result = Tuple[Optional[Any], Optional[Error]]


class DashboardAPI:
    """Client for the dashboard HTTP API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Server address, e.g. ``http://localhost:8000``.
            api_prefix: Path prefix the API is mounted under.
            timeout: Per‑request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/") + api_prefix
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``, etc.).
            path: Path relative to the API prefix (e.g. ``/tasks``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    @staticmethod
    def _day(date: Optional[str]) -> Dict[str, Any] | None:
        return {"date": date} if date else None

    def _deleted(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[bool, Optional[Error]]:
        data, error = self._request("DELETE", path, params=params)
        if error:
            return False, error
        return bool(data and data.get("success")), None

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------
    def list_tasks(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/tasks")

    def create_task(self, text: str, order: int = 0) -> Result:
        return self._request("POST", "/tasks", json_body={"text": text, "order": order})

    def update_task(self, task_id: str, **changes: Any) -> Result:
        """Update a task, e.g. ``update_task(task_id, completed=True)``."""
        return self._request("PATCH", f"/tasks/{task_id}", json_body=changes)

    def delete_task(self, task_id: str) -> Tuple[bool, Optional[Error]]:
        return self._deleted(f"/tasks/{task_id}")

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------
    def get_settings(self) -> Result:
        return self._request("GET", "/settings")

    def save_settings(self, **fields: Any) -> Result:
        """Replace the settings record (``POST /settings``)."""
        return self._request("POST", "/settings", json_body=fields)

    def update_settings(self, **changes: Any) -> Result:
        return self._request("PATCH", "/settings", json_body=changes)

    # ------------------------------------------------------------------
    # Schedule
    # ------------------------------------------------------------------
    def list_schedule(self, date: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/schedule", self._day(date))

    def create_event(self, title: str, time: str, date: str) -> Result:
        return self._request("POST", "/schedule", json_body={"title": title, "time": time, "date": date})

    def update_event(self, event_id: str, **changes: Any) -> Result:
        return self._request("PATCH", f"/schedule/{event_id}", json_body=changes)

    def delete_event(self, event_id: str) -> Tuple[bool, Optional[Error]]:
        return self._deleted(f"/schedule/{event_id}")

    # ------------------------------------------------------------------
    # Habits
    # ------------------------------------------------------------------
    def list_habits(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/habits")

    def create_habit(self, name: str, icon: Optional[str] = None) -> Result:
        body: Dict[str, Any] = {"name": name}
        if icon:
            body["icon"] = icon
        return self._request("POST", "/habits", json_body=body)

    def update_habit(self, habit_id: str, **changes: Any) -> Result:
        return self._request("PATCH", f"/habits/{habit_id}", json_body=changes)

    def toggle_habit(self, habit_id: str, date: Optional[str] = None) -> Result:
        return self._request("POST", f"/habits/{habit_id}/toggle", params=self._day(date))

    def delete_habit(self, habit_id: str) -> Tuple[bool, Optional[Error]]:
        return self._deleted(f"/habits/{habit_id}")

    # ------------------------------------------------------------------
    # Quick links
    # ------------------------------------------------------------------
    def list_quick_links(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/quick-links")

    def create_quick_link(self, name: str, url: str, icon: Optional[str] = None, order: int = 0) -> Result:
        body: Dict[str, Any] = {"name": name, "url": url, "order": order}
        if icon:
            body["icon"] = icon
        return self._request("POST", "/quick-links", json_body=body)

    def update_quick_link(self, link_id: str, **changes: Any) -> Result:
        return self._request("PATCH", f"/quick-links/{link_id}", json_body=changes)

    def delete_quick_link(self, link_id: str) -> Tuple[bool, Optional[Error]]:
        return self._deleted(f"/quick-links/{link_id}")

    # ------------------------------------------------------------------
    # Per‑day records
    # ------------------------------------------------------------------
    def get_daily_summary(self, date: Optional[str] = None) -> Result:
        return self._request("GET", "/daily-summary", params=self._day(date))

    def put_daily_summary(self, date: str, **counters: Any) -> Result:
        return self._request("PUT", "/daily-summary", json_body={"date": date, **counters})

    def update_daily_summary(self, date: str, **changes: Any) -> Result:
        return self._request("PATCH", "/daily-summary", params=self._day(date), json_body=changes)

    def delete_daily_summary(self, date: str) -> Tuple[bool, Optional[Error]]:
        return self._deleted("/daily-summary", self._day(date))

    def get_daily_book(self, date: Optional[str] = None) -> Result:
        return self._request("GET", "/daily-book", params=self._day(date))

    def put_daily_book(self, date: str, title: str, author: str, **fields: Any) -> Result:
        """Set the book of the day; ``summary``, ``keyTakeaway`` and ``genre`` are required too."""
        body = {"date": date, "title": title, "author": author, **fields}
        return self._request("PUT", "/daily-book", json_body=body)

    def update_daily_book(self, date: str, **changes: Any) -> Result:
        """Partially update the book; ``coverUrl=None`` clears the cover."""
        return self._request("PATCH", "/daily-book", params=self._day(date), json_body=changes)

    def delete_daily_book(self, date: str) -> Tuple[bool, Optional[Error]]:
        return self._deleted("/daily-book", self._day(date))

    def list_website_usage(self, date: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/website-usage", self._day(date))

    def record_website_usage(self, date: str, domain: str, title: str, **fields: Any) -> Result:
        """Store one usage row, e.g. ``timeSpentMinutes=30, category="work"``."""
        body = {"date": date, "domain": domain, "title": title, **fields}
        return self._request("POST", "/website-usage", json_body=body)

    def update_website_usage(self, usage_id: str, **changes: Any) -> Result:
        return self._request("PATCH", f"/website-usage/{usage_id}", json_body=changes)

    def delete_website_usage(self, usage_id: str) -> Tuple[bool, Optional[Error]]:
        return self._deleted(f"/website-usage/{usage_id}")

    def list_insights(self, date: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/ai-insights", self._day(date))

    def add_insight(self, date: str, insight: str, category: str, **fields: Any) -> Result:
        body = {"date": date, "insight": insight, "category": category, **fields}
        return self._request("POST", "/ai-insights", json_body=body)

    def update_insight(self, insight_id: str, **changes: Any) -> Result:
        return self._request("PATCH", f"/ai-insights/{insight_id}", json_body=changes)

    def delete_insight(self, insight_id: str) -> Tuple[bool, Optional[Error]]:
        return self._deleted(f"/ai-insights/{insight_id}")

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def get_current_user(self) -> Result:
        return self._request("GET", "/users/me")

    # ------------------------------------------------------------------
    # Integrations
    # ------------------------------------------------------------------
    def get_quote(self) -> Result:
        return self._request("GET", "/quote")

    def get_weather(self, lat: float, lon: float) -> Result:
        return self._request("GET", "/weather", params={"lat": lat, "lon": lon})
