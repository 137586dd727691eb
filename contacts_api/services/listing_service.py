import logging

from contacts_api.errors import InvalidRequestError, NotFoundError
from contacts_api.repositories.user_repo import UserRepository
from contacts_api.schemas.user import User

logger = logging.getLogger(__name__)


class ListingService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    async def list_users(self, *, sort: bool = False) -> list[User]:
        users = await self.repo.scan()
        if sort:
            # sorted() is stable, so ties keep the scan order
            users = sorted(users, key=User.sort_key)
        return users

    async def search_by_name(self, name: str) -> list[User]:
        """First-name matches followed by last-name matches.

        A record whose first and last name both equal ``name`` appears twice.
        """
        by_first_name = await self.repo.find_by_first_name(name)
        by_last_name = await self.repo.find_by_last_name(name)
        return by_first_name + by_last_name

    async def resolve(self, params: dict[str, str]) -> list[User]:
        if not params:
            users = await self.list_users()
        elif params.get("sorted") == "true":
            users = await self.list_users(sort=True)
        elif params.get("name"):
            users = await self.search_by_name(params["name"])
        else:
            raise InvalidRequestError("cannot resolve query")
        if not users:
            raise NotFoundError("no user found with given queries")
        logger.debug("listing %d users for %s", len(users), params)
        return users
