class MomentumParameters:
    """Thresholds and weights for the goal momentum score"""
    # Stage boundaries (days since the goal was created)
    grace_period_days: int = 3
    early_stage_days: int = 7

    # Grace period: only completions move the score up
    grace_max_score: float = 30.0
    grace_miss_penalty_per_log: float = 5.0
    grace_max_penalty: float = 15.0

    # Base score (50% completion = neutral)
    neutral_completion_percent: float = 50.0
    early_stage_damping: float = 0.6
    early_stage_floor: float = 5.0

    # Streaks
    completion_streak_min: int = 3
    completion_streak_bonus: float = 3.0
    completion_streak_cap: float = 20.0
    miss_streak_min: int = 2
    miss_streak_penalty: float = 4.0
    miss_streak_cap: float = 15.0
    early_stage_streak_factor: float = 0.5

    # Timeline adjustment (established goals only)
    timeline_min_logs: int = 7
    expected_completion_rate: float = 0.7
    timeline_min_progress: float = 0.25
    timeline_bonus_gap: float = 0.2
    timeline_bonus_weight: float = 30.0
    timeline_bonus_cap: float = 15.0
    timeline_penalty_gap: float = -0.3
    timeline_penalty_weight: float = 25.0
    timeline_penalty_cap: float = -25.0

    # Recent trend
    trend_min_logs: int = 3
    trend_window: int = 7
    trend_weight: float = 10.0

    # Bounds
    min_score: int = -100
    max_score: int = 100


class StatusThresholds:
    """Score bands for the qualitative status label"""
    struggling_max: int = -50
    falling_behind_max: int = -10   # exclusive
    maintaining_max: int = 10
    progressing_max: int = 50


class ReviewThresholds:
    """Weekly completion percentages for review suggestions"""
    excellent: int = 90
    good: int = 70
    fair: int = 50
