"""
Lifestyle Execution

Goal, recurring task and weekly review tracking with a goal momentum score.
"""
