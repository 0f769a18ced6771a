import os

from .app_config import DEFAULT_USER_ID


class Config:
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///lifestyle.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    API_TITLE = "Lifestyle Execution"
    API_VERSION = "v1"
    OPENAPI_VERSION = "3.0.3"
    OPENAPI_URL_PREFIX = "/"
    OPENAPI_SWAGGER_UI_PATH = "/swagger-ui"
    OPENAPI_SWAGGER_UI_URL = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/"
    OPENAPI_REDOC_PATH = "/redoc"
    OPENAPI_REDOC_URL = "https://cdn.jsdelivr.net/npm/redoc@latest/bundles/redoc.standalone.js"
    API_SPEC_OPTIONS = {
        "tags": [
            # Planning
            {"name": "Goals", "description": "Operations on goals"},
            {"name": "Tasks", "description": "Operations on recurring tasks"},
            {"name": "Task Logs", "description": "Daily task log generation and completion"},
            # Insight
            {"name": "Scores", "description": "Goal momentum scores"},
            {"name": "Dashboard", "description": "Daily and weekly execution stats"},
            {"name": "Weekly Review", "description": "Sunday reflection per goal"},
        ],
        "x-tagGroups": [
            {"name": "Planning", "tags": ["Goals", "Tasks", "Task Logs"]},
            {"name": "Insight", "tags": ["Scores", "Dashboard", "Weekly Review"]},
        ]
    }

    DEFAULT_USER_ID = DEFAULT_USER_ID
    # Weekly reviews are a Sunday ritual; switch off to allow any day
    REVIEW_SUNDAY_ONLY = os.getenv("REVIEW_SUNDAY_ONLY", "true").lower() == "true"


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
