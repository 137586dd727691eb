import logging
from functools import lru_cache

import boto3

from contacts_api.config import BACKEND_DYNAMODB, BACKEND_SQL, ConfigError, Settings, get_settings
from contacts_api.database import get_sessionmaker
from contacts_api.repositories.dynamo_repo import DynamoUserRepository
from contacts_api.repositories.sql_repo import SqlUserRepository
from contacts_api.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)


def build_user_repository(settings: Settings) -> UserRepository:
    index_names = {
        "first_name_index": settings.first_name_index,
        "last_name_index": settings.last_name_index,
    }
    if settings.store_backend == BACKEND_DYNAMODB:
        if not settings.table_name:
            logger.warning("TABLE_NAME is not set; dynamodb calls will address an empty table name")
        client = boto3.client(
            "dynamodb",
            region_name=settings.aws_region,
            endpoint_url=settings.dynamodb_endpoint_url,
        )
        return DynamoUserRepository(client, settings.table_name, **index_names)
    if settings.store_backend == BACKEND_SQL:
        return SqlUserRepository(get_sessionmaker(settings.database_url), **index_names)
    raise ConfigError(f"unsupported STORE_BACKEND {settings.store_backend!r}")


@lru_cache
def get_user_repository() -> UserRepository:
    """Process-wide store client, built on first request and reused after."""
    return build_user_repository(get_settings())
