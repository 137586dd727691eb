from abc import ABC, abstractmethod

from contacts_api.schemas.user import User

FIRST_NAME_FIELD = "firstName"
LAST_NAME_FIELD = "lastName"


class UserRepository(ABC):
    """Record store for user contact info.

    ``userID`` is the primary key; ``firstName`` and ``lastName`` are each
    covered by a secondary index that supports exact-match lookups.
    """

    def __init__(self, first_name_index: str = "firstNameIndex", last_name_index: str = "lastNameIndex"):
        self.first_name_index = first_name_index
        self.last_name_index = last_name_index

    @abstractmethod
    async def get(self, user_id: str) -> User | None:
        """Point lookup by primary key."""

    @abstractmethod
    async def put(self, user: User) -> None:
        """Insert or replace the whole record."""

    @abstractmethod
    async def delete(self, user_id: str) -> None:
        """Delete by primary key. Deleting an absent key is not an error."""

    @abstractmethod
    async def query(self, index_name: str, field: str, value: str) -> list[User]:
        """Exact-match lookup on a secondary index."""

    @abstractmethod
    async def scan(self) -> list[User]:
        """Every record, in the store's own order."""

    async def find_by_first_name(self, first_name: str) -> list[User]:
        return await self.query(self.first_name_index, FIRST_NAME_FIELD, first_name)

    async def find_by_last_name(self, last_name: str) -> list[User]:
        return await self.query(self.last_name_index, LAST_NAME_FIELD, last_name)
