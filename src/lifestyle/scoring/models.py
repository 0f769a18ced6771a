"""
Scoring Models

Plain records consumed by the momentum scorer. They carry explicit foreign
keys and no storage client, so the same scorer runs on ORM rows, flat rows
or nested payloads from the hosted backend.
"""
from enum import Enum
from datetime import date, datetime
from dataclasses import dataclass
from typing import Optional, Tuple


class LogStatus(str, Enum):
    PENDING = 'pending'
    COMPLETED = 'completed'
    MISSED = 'missed'


class MomentumStatus(str, Enum):
    STRUGGLING = 'struggling'
    MAINTAINING = 'maintaining'
    EXCELLING = 'excelling'


@dataclass(frozen=True)
class TaskLogRecord:
    """One scheduled occurrence of a task"""
    id: Optional[int]
    task_id: Optional[int]
    due_date: date
    status: LogStatus = LogStatus.PENDING
    completed_at: Optional[datetime] = None


@dataclass(frozen=True)
class TaskRecord:
    """
    Recurring task with its logs.

    Attributes:
        frequency: daily / every_2_days / weekly / custom
        custom_days: Interval for 'custom' frequency
        logs: Task logs in any order
    """
    id: Optional[int]
    goal_id: Optional[int]
    title: str = ""
    frequency: str = "daily"
    custom_days: Optional[int] = None
    start_date: Optional[date] = None
    is_active: bool = True
    logs: Tuple[TaskLogRecord, ...] = ()


@dataclass(frozen=True)
class GoalRecord:
    """Goal with its tasks, as seen by the scorer"""
    id: Optional[int]
    created_at: datetime
    deadline: datetime
    title: str = ""
    category: str = ""
    is_archived: bool = False
    tasks: Tuple[TaskRecord, ...] = ()


@dataclass
class MomentumResult:
    """
    Momentum of one goal at one instant.

    Attributes:
        score: Integer in [-100, 100]
        status: Qualitative tag derived from score
        label: Display text derived from score
        progress_fill: Progress bar width in percent
        completion_rate: Plain completed/total percentage
    """
    goal_id: Optional[int]
    score: int
    status: MomentumStatus
    label: str
    progress_fill: float
    completion_rate: int = 0
    completed_logs: int = 0
    total_logs: int = 0


@dataclass
class WeeklyMomentum:
    """Momentum over the Monday-Sunday window containing the scoring instant"""
    goal_id: Optional[int]
    week_start: date
    week_end: date
    completed: int = 0
    total: int = 0
    percentage: int = 0
    score: int = 0
    status: MomentumStatus = MomentumStatus.MAINTAINING
    label: str = "Maintaining"
