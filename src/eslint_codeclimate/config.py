import logging
import os

_CWD_ENV = "ESLINT_CODECLIMATE_CWD"
_LOG_LEVEL_ENV = "ESLINT_CODECLIMATE_LOG_LEVEL"


def get_default_cwd() -> str:
    return os.getenv(_CWD_ENV) or os.getcwd()


def get_log_level() -> str:
    level = os.getenv(_LOG_LEVEL_ENV, "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level in {_LOG_LEVEL_ENV}: '{level}'")
    return level
