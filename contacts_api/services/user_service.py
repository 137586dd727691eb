import enum
import logging
from dataclasses import dataclass

from pydantic import ValidationError

from contacts_api.errors import InvalidRequestError, NotFoundError
from contacts_api.repositories.user_repo import UserRepository
from contacts_api.schemas.user import User

logger = logging.getLogger(__name__)


class SelectorKind(enum.Enum):
    USER_ID = "userID"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    NONE = "none"


@dataclass(frozen=True)
class DeleteSelector:
    """Which records a DELETE addresses.

    Resolved with precedence userID > firstName > lastName; empty values count
    as absent.
    """

    kind: SelectorKind
    value: str = ""

    @classmethod
    def resolve(cls, user_id: str | None, first_name: str | None, last_name: str | None) -> "DeleteSelector":
        if user_id:
            return cls(SelectorKind.USER_ID, user_id)
        if first_name:
            return cls(SelectorKind.FIRST_NAME, first_name)
        if last_name:
            return cls(SelectorKind.LAST_NAME, last_name)
        return cls(SelectorKind.NONE)


def parse_user(body: bytes) -> User:
    try:
        user = User.model_validate_json(body)
    except ValidationError as exc:
        raise InvalidRequestError("invalid request body") from exc
    return user


def ensure_complete(user: User) -> User:
    missing = user.missing_fields()
    if missing:
        logger.info("rejecting user %r, missing %s", user.user_id, ", ".join(missing))
        raise InvalidRequestError("missing required fields")
    return user


class UserService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    async def get_user(self, user_id: str) -> User:
        user = await self.repo.get(user_id)
        if user is None:
            raise NotFoundError("user not found")
        return user

    async def create_user(self, body: bytes) -> User:
        user = ensure_complete(parse_user(body))
        await self.repo.put(user)
        logger.info("created user %s", user.user_id)
        return user

    async def update_user(self, user_id: str, body: bytes) -> User:
        """Replace the whole record; the path ID wins over any ID in the body."""
        user = parse_user(body).model_copy(update={"user_id": user_id})
        ensure_complete(user)
        await self.repo.put(user)
        logger.info("updated user %s", user.user_id)
        return user

    async def delete_users(self, selector: DeleteSelector) -> int:
        """Delete the addressed records and return how many were deleted.

        Name-based deletes remove matches one by one without rollback: if the
        store fails midway the earlier deletes stay applied and the error
        propagates.
        """
        if selector.kind is SelectorKind.NONE:
            raise InvalidRequestError("provide at least one of userID, firstName, or lastName")

        if selector.kind is SelectorKind.USER_ID:
            await self.repo.delete(selector.value)
            logger.info("deleted user %s", selector.value)
            return 1

        if selector.kind is SelectorKind.FIRST_NAME:
            users = await self.repo.find_by_first_name(selector.value)
        else:
            users = await self.repo.find_by_last_name(selector.value)
        if not users:
            raise NotFoundError(f"no user found for given {selector.kind.value}")

        for user in users:
            await self.repo.delete(user.user_id)
        logger.info("deleted %d users with %s=%s", len(users), selector.kind.value, selector.value)
        return len(users)
