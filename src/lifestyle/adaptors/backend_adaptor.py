"""
Backend Adaptor

Client for the hosted backend-as-a-service (PostgREST tables plus RPC
functions). Nested goal payloads are translated into scoring records at
this boundary so nothing downstream depends on the backend's query shape.
"""
from datetime import date, datetime, timezone
from typing import Dict, List, Optional

import requests

from lifestyle.config import BACKEND_URL, BACKEND_API_KEY, BACKEND_TIMEOUT, setup_logger
from lifestyle.scoring import GoalRecord, goal_from_payload

GOALS_SELECT = "*,tasks(*,task_logs(*))"


class BackendError(Exception):
    """Raised when a backend write or RPC call fails"""


class BackendAdaptor:
    def __init__(self, base_url: Optional[str] = None, api_key: Optional[str] = None,
                 logger=None, timeout: int = BACKEND_TIMEOUT):
        self.base_url = (base_url or BACKEND_URL).rstrip("/")
        self.api_key = api_key if api_key is not None else BACKEND_API_KEY
        self.logger = logger or setup_logger(name="BackendAdaptor")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        })

    def _url(self, path: str) -> str:
        return f"{self.base_url}/rest/v1/{path}"

    # ========== Queries ==========

    def fetch_goal_payloads(self, user_id: str, include_archived: bool = False) -> List[Dict]:
        """
        Fetch goals with nested tasks and task logs, newest first.

        Returns:
            Raw JSON rows, or an empty list if the request fails
        """
        params = {
            "select": GOALS_SELECT,
            "user_id": f"eq.{user_id}",
            "order": "created_at.desc",
        }
        if not include_archived:
            params["is_archived"] = "eq.false"

        try:
            response = self.session.get(self._url("goals"), params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json() or []
        except (requests.RequestException, ValueError) as e:
            self.logger.error(f"Failed to fetch goals for {user_id}: {e}")
            return []

    def fetch_goals(self, user_id: str, include_archived: bool = False) -> List[GoalRecord]:
        """Fetch goals as scoring records; malformed rows are logged and skipped"""
        goals = []
        for payload in self.fetch_goal_payloads(user_id, include_archived):
            try:
                goals.append(goal_from_payload(payload))
            except (KeyError, TypeError, ValueError) as e:
                self.logger.warning(f"Skipping malformed goal {payload.get('id')}: {e}")
        return goals

    # ========== RPC ==========

    def rpc(self, name: str, params: Optional[Dict] = None):
        """
        Call a backend function.

        Raises:
            BackendError: on any transport or HTTP error
        """
        try:
            response = self.session.post(self._url(f"rpc/{name}"), json=params or {}, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise BackendError(f"RPC {name} failed: {e}") from e
        return response.json() if response.content else None

    def generate_task_logs_for_date(self, target_date: Optional[date] = None):
        """Ask the backend to create today's (or target_date's) pending logs"""
        params = {"target_date": target_date.isoformat()} if target_date else {}
        result = self.rpc("generate_task_logs_for_date", params)
        self.logger.info(f"Task logs generated for {target_date or 'today'}")
        return result

    def mark_overdue_tasks_as_missed(self):
        return self.rpc("mark_overdue_tasks_as_missed")

    def ensure_task_logs_up_to_date(self) -> bool:
        """
        Generate today's logs and mark overdue ones as missed.

        Errors are logged and swallowed so callers are never blocked.
        """
        try:
            self.logger.info("Generating task logs for today and marking overdue tasks...")
            self.generate_task_logs_for_date()
            self.mark_overdue_tasks_as_missed()
            self.logger.info("Task logs updated successfully")
            return True
        except BackendError as e:
            self.logger.error(f"Failed to update task logs: {e}")
            return False

    # ========== Mutations ==========

    def mark_task_complete(self, log_id: int, completed_at: Optional[datetime] = None) -> bool:
        """
        Mark one task log completed.

        Raises:
            BackendError: if the update fails
        """
        completed_at = completed_at or datetime.now(timezone.utc)
        try:
            response = self.session.patch(
                self._url("task_logs"),
                params={"id": f"eq.{log_id}"},
                json={"status": "completed", "completed_at": completed_at.isoformat()},
                timeout=self.timeout
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise BackendError(f"Failed to complete task log {log_id}: {e}") from e
        return True
