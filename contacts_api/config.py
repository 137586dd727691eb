import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

BACKEND_DYNAMODB = "dynamodb"
BACKEND_SQL = "sql"


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class Settings:
    table_name: str = ""
    store_backend: str = BACKEND_DYNAMODB
    database_url: str = "sqlite+aiosqlite:///./users.db"
    aws_region: str | None = None
    dynamodb_endpoint_url: str | None = None
    first_name_index: str = "firstNameIndex"
    last_name_index: str = "lastNameIndex"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            # no fallback: an unset TABLE_NAME addresses an empty table name
            table_name=os.getenv("TABLE_NAME", ""),
            store_backend=os.getenv("STORE_BACKEND", BACKEND_DYNAMODB).lower(),
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            aws_region=os.getenv("AWS_REGION") or None,
            dynamodb_endpoint_url=os.getenv("DYNAMODB_ENDPOINT_URL") or None,
            first_name_index=os.getenv("FIRST_NAME_INDEX", cls.first_name_index),
            last_name_index=os.getenv("LAST_NAME_INDEX", cls.last_name_index),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
