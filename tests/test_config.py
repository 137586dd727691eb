import pytest

from contacts_api.config import ConfigError, Settings
from contacts_api.repositories.dynamo_repo import DynamoUserRepository
from contacts_api.repositories.factory import build_user_repository
from contacts_api.repositories.sql_repo import SqlUserRepository


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("TABLE_NAME", "users-contact-info")
    monkeypatch.setenv("STORE_BACKEND", "SQL")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.delenv("FIRST_NAME_INDEX", raising=False)

    settings = Settings.from_env()
    assert settings.table_name == "users-contact-info"
    assert settings.store_backend == "sql"
    assert settings.log_level == "DEBUG"
    assert settings.first_name_index == "firstNameIndex"


def test_table_name_has_no_fallback(monkeypatch):
    monkeypatch.delenv("TABLE_NAME", raising=False)
    assert Settings.from_env().table_name == ""


def test_build_dynamodb_repository(caplog):
    settings = Settings(table_name="users-contact-info", aws_region="eu-west-1", last_name_index="byLast")
    repo = build_user_repository(settings)
    assert isinstance(repo, DynamoUserRepository)
    assert repo.table_name == "users-contact-info"
    assert repo.last_name_index == "byLast"
    assert "TABLE_NAME" not in caplog.text


def test_build_dynamodb_repository_without_table_name(caplog):
    build_user_repository(Settings(aws_region="eu-west-1"))
    assert "TABLE_NAME is not set" in caplog.text


def test_build_sql_repository(tmp_path):
    settings = Settings(store_backend="sql", database_url=f"sqlite+aiosqlite:///{tmp_path / 'x.db'}")
    assert isinstance(build_user_repository(settings), SqlUserRepository)


def test_unknown_backend():
    with pytest.raises(ConfigError):
        build_user_repository(Settings(store_backend="redis"))
