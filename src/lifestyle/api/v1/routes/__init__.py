"""
API v1 Routes

Blueprints organized by category for Swagger UI navigation.
"""

# PLANNING
from .goal_routes import blp as goals_bp
from .task_routes import blp as tasks_bp
from .task_log_routes import blp as logs_bp

# INSIGHT
from .score_routes import blp as scores_bp
from .dashboard_routes import blp as dashboard_bp
from .review_routes import blp as reviews_bp

__all__ = [
    "goals_bp",
    "tasks_bp",
    "logs_bp",
    "scores_bp",
    "dashboard_bp",
    "reviews_bp",
]
