import pytest
from datetime import date, datetime, timedelta, timezone

from lifestyle.app import create_app
from lifestyle.config import TestConfig
from lifestyle.db import db as _db
from lifestyle.models import GoalModel, TaskModel, TaskLogModel
from lifestyle.scoring import GoalRecord, TaskRecord, TaskLogRecord, LogStatus

# Wednesday; the week runs Mon 2026-10-12 .. Sun 2026-10-18
NOW = datetime(2026, 10, 14, 12, 0, tzinfo=timezone.utc)
TODAY = NOW.date()
SUNDAY = date(2026, 10, 18)


def build_goal(statuses, now=NOW, age_days=30, length_days=100, goal_id=1):
    """
    Goal with one daily task whose logs end yesterday, one log per status,
    oldest first.
    """
    created_at = now - timedelta(days=age_days)
    logs = tuple(
        TaskLogRecord(
            id=i + 1,
            task_id=1,
            due_date=(now - timedelta(days=len(statuses) - i)).date(),
            status=LogStatus(status),
        )
        for i, status in enumerate(statuses)
    )
    task = TaskRecord(id=1, goal_id=goal_id, title="Run 5k", logs=logs)
    return GoalRecord(
        id=goal_id,
        created_at=created_at,
        deadline=created_at + timedelta(days=length_days),
        title="Marathon",
        category="Health",
        tasks=(task,),
    )


@pytest.fixture
def goal_factory():
    return build_goal


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def seeded_goal(db):
    """One goal (created 30 days before NOW) with a daily task started on 2026-10-10"""
    goal = GoalModel(
        user_id=TestConfig.DEFAULT_USER_ID,
        title="Run a marathon",
        category="Health",
        deadline=datetime(2027, 1, 21),
        created_at=datetime(2026, 9, 14, 12, 0),
    )
    task = TaskModel(goal=goal, title="Run 5k", frequency="daily", start_date=date(2026, 10, 10))
    db.session.add_all([goal, task])
    db.session.commit()
    return goal


def add_log(db, task, due_date, status="pending"):
    log = TaskLogModel(task_id=task.id, due_date=due_date, status=status)
    db.session.add(log)
    db.session.commit()
    return log
