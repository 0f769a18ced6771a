"""
Goal Momentum Scorer

Converts a goal's task log history into an integer score in [-100, 100].

The score blends five signals:
1. Completion rate against a 50% neutral point
2. Goal age (grace period, early stage, established)
3. Current completion / miss streak
4. Completion rate against the expected 70% once the timeline is under way
5. Recent trend (last 7 logs against the overall rate)

Everything here is pure: the scoring instant is a parameter and nothing is
read from or written to storage.
"""
import math
from dataclasses import replace
from datetime import date, datetime, timezone
from typing import List, Optional, Tuple

from lifestyle.config import MomentumParameters, StatusThresholds
from lifestyle.utils import days_between, get_week_bounds, to_date, to_naive_utc
from .models import (
    GoalRecord, TaskLogRecord, LogStatus, MomentumStatus,
    MomentumResult, WeeklyMomentum
)


def flatten_logs(goal: GoalRecord) -> List[TaskLogRecord]:
    """All logs of all tasks of a goal, ascending by due date"""
    logs = [log for task in (goal.tasks or ()) for log in (task.logs or ())]
    return sorted(logs, key=lambda log: log.due_date)


def count_statuses(logs: List[TaskLogRecord]) -> Tuple[int, int, int]:
    """
    Returns:
        Tuple of (completed, missed, pending) counts
    """
    completed = sum(1 for log in logs if log.status == LogStatus.COMPLETED)
    missed = sum(1 for log in logs if log.status == LogStatus.MISSED)
    return completed, missed, len(logs) - completed - missed


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value, lower, upper):
    return max(lower, min(upper, value))


def _streak_status(log: TaskLogRecord, today: date) -> Optional[LogStatus]:
    # Pending logs still open today do not count; past-due pending is a miss
    if log.status == LogStatus.COMPLETED:
        return LogStatus.COMPLETED
    if log.status == LogStatus.MISSED or log.due_date < today:
        return LogStatus.MISSED
    return None


def current_streaks(logs: List[TaskLogRecord], today: date) -> Tuple[int, int]:
    """
    Length of the run of identical outcomes at the end of the log list.

    Parameters:
        logs: Logs sorted ascending by due date
        today: Calendar date of the scoring instant

    Returns:
        Tuple of (completion_streak, miss_streak); at most one is non-zero
    """
    run_status = None
    run_length = 0
    for log in reversed(logs):
        status = _streak_status(log, today)
        if status is None:
            continue
        if run_status is None:
            run_status = status
        if status != run_status:
            break
        run_length += 1

    if run_status == LogStatus.COMPLETED:
        return run_length, 0
    if run_status == LogStatus.MISSED:
        return 0, run_length
    return 0, 0


def _grace_score(completed: int, missed: int, params: MomentumParameters) -> float:
    if completed > 0:
        return min(params.grace_max_score,
                   completed / (completed + missed) * params.grace_max_score)
    if missed == 0:
        return 0.0
    return -min(params.grace_max_penalty, missed * params.grace_miss_penalty_per_log)


def _streak_adjustment(completion_streak: int, miss_streak: int, early: bool,
                       params: MomentumParameters) -> float:
    factor = params.early_stage_streak_factor if early else 1.0
    adjustment = 0.0
    if completion_streak >= params.completion_streak_min:
        adjustment += min(params.completion_streak_cap,
                          completion_streak * params.completion_streak_bonus) * factor
    if miss_streak >= params.miss_streak_min:
        adjustment -= min(params.miss_streak_cap,
                          miss_streak * params.miss_streak_penalty) * factor
    return adjustment


def _timeline_adjustment(rate: float, total: int, timeline_progress: float,
                         params: MomentumParameters) -> float:
    if total < params.timeline_min_logs or timeline_progress <= params.timeline_min_progress:
        return 0.0
    gap = rate - params.expected_completion_rate
    if gap > params.timeline_bonus_gap:
        return min(params.timeline_bonus_cap, gap * params.timeline_bonus_weight)
    if gap < params.timeline_penalty_gap:
        return max(params.timeline_penalty_cap,
                   gap * params.timeline_penalty_weight * timeline_progress)
    return 0.0


def _trend_adjustment(logs: List[TaskLogRecord], rate: float,
                      params: MomentumParameters) -> float:
    if len(logs) < params.trend_min_logs:
        return 0.0
    recent = logs[-params.trend_window:]
    recent_completed = sum(1 for log in recent if log.status == LogStatus.COMPLETED)
    return (recent_completed / len(recent) - rate) * params.trend_weight


def _finalize(raw_score: float, params: MomentumParameters) -> int:
    return _clamp(_round_half_up(raw_score), params.min_score, params.max_score)


def calculate_momentum_score(goal: GoalRecord, now: Optional[datetime] = None,
                             params: Optional[MomentumParameters] = None) -> int:
    """
    Score a goal's execution momentum.

    Parameters:
        goal: Goal with nested tasks and logs
        now: Scoring instant (defaults to the current UTC time)
        params: Scoring thresholds and weights

    Returns:
        int: Score clamped to [-100, 100]; 0 when there is no history
    """
    params = params or MomentumParameters()
    now = now or datetime.now(timezone.utc)

    logs = flatten_logs(goal)
    if not logs:
        return 0

    # Deadline before creation is bad data, never a zero/negative divisor
    total_goal_days = max(1, days_between(goal.created_at, goal.deadline))
    days_elapsed = max(0, days_between(goal.created_at, now))
    timeline_progress = min(1.0, days_elapsed / total_goal_days)

    completed, missed, _ = count_statuses(logs)
    total = len(logs)
    rate = completed / total

    if days_elapsed <= params.grace_period_days:
        return _finalize(_grace_score(completed, missed, params), params)

    early = days_elapsed <= params.early_stage_days
    base = rate * 100 - params.neutral_completion_percent
    if early:
        base *= params.early_stage_damping
        if completed > missed:
            base = max(base, params.early_stage_floor)

    completion_streak, miss_streak = current_streaks(logs, to_date(to_naive_utc(now)))
    streak = _streak_adjustment(completion_streak, miss_streak, early, params)
    timeline = 0.0 if early else _timeline_adjustment(rate, total, timeline_progress, params)
    trend = _trend_adjustment(logs, rate, params)

    return _finalize(base + streak + timeline + trend, params)


def get_momentum_status(score: int) -> Tuple[MomentumStatus, str]:
    """
    Map a score to its status tag and display text.

    <= -50 Struggling, (-50, -10) Falling Behind, [-10, 10] Maintaining,
    (10, 50] Progressing, > 50 Excelling.
    """
    if score <= StatusThresholds.struggling_max:
        return MomentumStatus.STRUGGLING, "Struggling"
    if score < StatusThresholds.falling_behind_max:
        return MomentumStatus.STRUGGLING, "Falling Behind"
    if score <= StatusThresholds.maintaining_max:
        return MomentumStatus.MAINTAINING, "Maintaining"
    if score <= StatusThresholds.progressing_max:
        return MomentumStatus.EXCELLING, "Progressing"
    return MomentumStatus.EXCELLING, "Excelling"


def get_progress_fill(score: int) -> float:
    """Progress bar width in percent: -100 -> 0, 0 -> 50, 100 -> 100"""
    return _clamp((score + 100) / 2, 0, 100)


def completion_percentage(completed: int, total: int) -> int:
    return _round_half_up(completed / total * 100) if total > 0 else 0


def evaluate_goal(goal: GoalRecord, now: Optional[datetime] = None,
                  params: Optional[MomentumParameters] = None) -> MomentumResult:
    """Score a goal and attach status, label and progress fill"""
    now = now or datetime.now(timezone.utc)
    logs = flatten_logs(goal)
    completed, _, _ = count_statuses(logs)
    score = calculate_momentum_score(goal, now, params)
    status, label = get_momentum_status(score)
    return MomentumResult(
        goal_id=goal.id,
        score=score,
        status=status,
        label=label,
        progress_fill=get_progress_fill(score),
        completion_rate=completion_percentage(completed, len(logs)),
        completed_logs=completed,
        total_logs=len(logs),
    )


def restrict_to_window(goal: GoalRecord, start: date, end: date) -> GoalRecord:
    """Copy of the goal keeping only logs due within [start, end]"""
    tasks = tuple(
        replace(task, logs=tuple(log for log in (task.logs or ()) if start <= log.due_date <= end))
        for task in (goal.tasks or ())
    )
    return replace(goal, tasks=tasks)


def calculate_weekly_momentum(goal: GoalRecord, now: Optional[datetime] = None,
                              params: Optional[MomentumParameters] = None) -> WeeklyMomentum:
    """
    Momentum over the Monday-Sunday week containing now.

    Returns zeros when the goal has no logs due that week.
    """
    now = now or datetime.now(timezone.utc)
    week_start, week_end = get_week_bounds(to_naive_utc(now))
    week_goal = restrict_to_window(goal, week_start, week_end)

    logs = flatten_logs(week_goal)
    if not logs:
        return WeeklyMomentum(goal_id=goal.id, week_start=week_start, week_end=week_end)

    completed, _, _ = count_statuses(logs)
    score = calculate_momentum_score(week_goal, now, params)
    status, label = get_momentum_status(score)
    return WeeklyMomentum(
        goal_id=goal.id,
        week_start=week_start,
        week_end=week_end,
        completed=completed,
        total=len(logs),
        percentage=completion_percentage(completed, len(logs)),
        score=score,
        status=status,
        label=label,
    )
