from .app_config import DEFAULT_USER_ID, BACKEND_URL, BACKEND_API_KEY, BACKEND_TIMEOUT, LOG_DIR, LOG_LEVEL
from .flask_config import Config, TestConfig
from .logger_config import setup_logger
from .scoring_config import MomentumParameters, StatusThresholds, ReviewThresholds


__all__ = [
    #AppConfig
    "DEFAULT_USER_ID",
    "BACKEND_URL",
    "BACKEND_API_KEY",
    "BACKEND_TIMEOUT",
    "LOG_DIR",
    "LOG_LEVEL",

    #FlaskConfig
    "Config",
    "TestConfig",

    #Logger Config
    "setup_logger",

    #Scoring Config
    "MomentumParameters",
    "StatusThresholds",
    "ReviewThresholds",
]
