"""
Scoring Adapters

Translate storage shapes into scoring records:
- ORM models (GoalModel with tasks and logs loaded)
- Nested JSON from the hosted backend (goal -> tasks -> task_logs)
- Three flat row lists joined by foreign key
"""
from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from lifestyle.config import setup_logger
from lifestyle.utils import parse_iso_date, parse_iso_datetime
from .models import GoalRecord, TaskRecord, TaskLogRecord, LogStatus

logger = setup_logger(name="ScoringAdapters")


def parse_status(value) -> LogStatus:
    """Map a raw status to LogStatus; anything unknown counts as pending"""
    try:
        return LogStatus(value)
    except ValueError:
        logger.warning(f"Unknown task log status {value!r}, treating as pending")
        return LogStatus.PENDING


# ========== ORM Models ==========

def log_from_model(log) -> TaskLogRecord:
    return TaskLogRecord(
        id=log.id,
        task_id=log.task_id,
        due_date=log.due_date,
        status=parse_status(log.status),
        completed_at=log.completed_at,
    )


def task_from_model(task) -> TaskRecord:
    return TaskRecord(
        id=task.id,
        goal_id=task.goal_id,
        title=task.title,
        frequency=task.frequency,
        custom_days=task.custom_days,
        start_date=task.start_date,
        is_active=task.is_active,
        logs=tuple(log_from_model(log) for log in (task.logs or [])),
    )


def goal_from_model(goal) -> GoalRecord:
    return GoalRecord(
        id=goal.id,
        title=goal.title,
        category=goal.category,
        created_at=goal.created_at,
        deadline=goal.deadline,
        is_archived=bool(goal.is_archived),
        tasks=tuple(task_from_model(task) for task in (goal.tasks or [])),
    )


# ========== Nested Payloads ==========

def log_from_payload(payload: Dict, task_id: Optional[int] = None) -> TaskLogRecord:
    return TaskLogRecord(
        id=payload.get('id'),
        task_id=payload.get('task_id', task_id),
        due_date=parse_iso_date(payload['due_date']),
        status=parse_status(payload.get('status', LogStatus.PENDING.value)),
        completed_at=parse_iso_datetime(payload.get('completed_at')),
    )


def task_from_payload(payload: Dict, goal_id: Optional[int] = None) -> TaskRecord:
    task_id = payload.get('id')
    return TaskRecord(
        id=task_id,
        goal_id=payload.get('goal_id', goal_id),
        title=payload.get('title') or "",
        frequency=payload.get('frequency') or "daily",
        custom_days=payload.get('custom_days'),
        start_date=parse_iso_date(payload.get('start_date')),
        is_active=payload.get('is_active', True),
        logs=tuple(
            log_from_payload(log, task_id)
            for log in (payload.get('task_logs') or [])
        ),
    )


def goal_from_payload(payload: Dict) -> GoalRecord:
    """
    Build a GoalRecord from a nested backend response.

    Missing `tasks` or `task_logs` collections are treated as empty.
    """
    goal_id = payload.get('id')
    return GoalRecord(
        id=goal_id,
        title=payload.get('title') or "",
        category=payload.get('category') or "",
        created_at=parse_iso_datetime(payload['created_at']),
        deadline=parse_iso_datetime(payload['deadline']),
        is_archived=bool(payload.get('is_archived', False)),
        tasks=tuple(
            task_from_payload(task, goal_id)
            for task in (payload.get('tasks') or [])
        ),
    )


# ========== Flat Rows ==========

def goal_from_rows(goal_row: Dict, task_rows: Iterable[Dict],
                   log_rows: Iterable[Dict]) -> GoalRecord:
    """
    Join flat goal / task / log rows on their foreign keys.

    Tasks belonging to other goals and logs belonging to other tasks are
    ignored.
    """
    logs_by_task = defaultdict(list)
    for row in log_rows:
        logs_by_task[row['task_id']].append(row)

    goal_id = goal_row.get('id')
    tasks: List[Dict] = []
    for row in task_rows:
        if row.get('goal_id') != goal_id:
            continue
        tasks.append({**row, 'task_logs': logs_by_task.get(row.get('id'), [])})

    return goal_from_payload({**goal_row, 'tasks': tasks})
