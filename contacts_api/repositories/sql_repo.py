import logging

from sqlalchemy import delete as sa_delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from contacts_api.errors import StoreError
from contacts_api.models.user import UserRecord
from contacts_api.repositories.mapping import item_to_user, user_to_item
from contacts_api.repositories.user_repo import FIRST_NAME_FIELD, LAST_NAME_FIELD, UserRepository
from contacts_api.schemas.user import User

logger = logging.getLogger(__name__)


class SqlUserRepository(UserRepository):
    """User store on a relational table via SQLAlchemy (async).

    The ``firstName``/``lastName`` columns carry ordinary indexes that play
    the part of the secondary indexes. Rows come back in primary key order.
    """

    def __init__(self, sessionmaker: async_sessionmaker[AsyncSession], **index_names):
        super().__init__(**index_names)
        self.sessionmaker = sessionmaker
        self.index_columns = {
            self.first_name_index: (FIRST_NAME_FIELD, UserRecord.first_name),
            self.last_name_index: (LAST_NAME_FIELD, UserRecord.last_name),
        }

    async def get(self, user_id: str) -> User | None:
        logger.debug("sql get %s", user_id)
        try:
            async with self.sessionmaker() as db:
                record = await db.get(UserRecord, user_id)
        except SQLAlchemyError as exc:
            logger.exception("sql get failed")
            raise StoreError() from exc
        if record is None:
            return None
        return item_to_user(record.to_item())

    async def put(self, user: User) -> None:
        logger.debug("sql put %s", user.user_id)
        try:
            async with self.sessionmaker() as db:
                await db.merge(UserRecord.from_item(user_to_item(user)))
                await db.commit()
        except SQLAlchemyError as exc:
            logger.exception("sql put failed")
            raise StoreError() from exc

    async def delete(self, user_id: str) -> None:
        logger.debug("sql delete %s", user_id)
        try:
            async with self.sessionmaker() as db:
                await db.execute(sa_delete(UserRecord).where(UserRecord.user_id == user_id))
                await db.commit()
        except SQLAlchemyError as exc:
            logger.exception("sql delete failed")
            raise StoreError() from exc

    async def query(self, index_name: str, field: str, value: str) -> list[User]:
        try:
            indexed_field, column = self.index_columns[index_name]
        except KeyError:
            raise ValueError(f"unknown index {index_name!r}") from None
        if indexed_field != field:
            raise ValueError(f"index {index_name!r} covers {indexed_field!r}, not {field!r}")
        logger.debug("sql query %s where %s = %s", index_name, field, value)
        return await self._select(select(UserRecord).where(column == value).order_by(UserRecord.user_id))

    async def scan(self) -> list[User]:
        logger.debug("sql scan")
        return await self._select(select(UserRecord).order_by(UserRecord.user_id))

    async def _select(self, stmt) -> list[User]:
        try:
            async with self.sessionmaker() as db:
                result = await db.execute(stmt)
                records = result.scalars().all()
        except SQLAlchemyError as exc:
            logger.exception("sql select failed")
            raise StoreError() from exc
        return [item_to_user(record.to_item()) for record in records]
