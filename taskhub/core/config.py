from os import getenv


def _flag(name: str, default: str) -> bool:
    return getenv(name, default).lower() in ("1", "true", "yes", "on")


class Settings:
    """Runtime settings, read from the environment unless overridden by keyword."""

    def __init__(self, **overrides):
        self.DATABASE_URL = getenv("DATABASE_URL", "sqlite:///./taskhub.db")
        self.SQL_ECHO = _flag("SQL_ECHO", "false")
        self.DB_TIMEOUT_SECONDS = float(getenv("DB_TIMEOUT_SECONDS", "5"))
        self.DB_READ_RETRIES = int(getenv("DB_READ_RETRIES", "1"))  # writes are never retried
        self.TASK_WRITES_ATOMIC = _flag("TASK_WRITES_ATOMIC", "true")

        self.JWT_SECRET = getenv("JWT_SECRET", "dev-secret-change-in-prod")
        self.JWT_EXPIRE_MIN = int(getenv("JWT_EXPIRE_MIN", "60"))

        self.LOG_LEVEL = getenv("LOG_LEVEL", "INFO")

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise AttributeError(f"Unknown setting: {key}")
            setattr(self, key, value)
