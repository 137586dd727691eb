import pytest

from contacts_api.errors import InvalidRequestError, NotFoundError, StoreError
from contacts_api.repositories.sql_repo import SqlUserRepository
from contacts_api.schemas.user import User
from contacts_api.services.listing_service import ListingService
from contacts_api.services.user_service import DeleteSelector, SelectorKind, UserService


class FailingDeleteRepository(SqlUserRepository):
    def __init__(self, sessionmaker, fail_on):
        super().__init__(sessionmaker)
        self.fail_on = fail_on

    async def delete(self, user_id):
        if user_id == self.fail_on:
            raise StoreError()
        await super().delete(user_id)


def user(user_id, first_name, last_name):
    return User(
        userID=user_id,
        firstName=first_name,
        lastName=last_name,
        address="1 Rd",
        mobileNumber="555",
        emailAddress="a@x.com",
    )


@pytest.mark.parametrize(
    "args, expected",
    [
        (("u1", "Ann", "Lee"), DeleteSelector(SelectorKind.USER_ID, "u1")),
        ((None, "Ann", "Lee"), DeleteSelector(SelectorKind.FIRST_NAME, "Ann")),
        (("", "", "Lee"), DeleteSelector(SelectorKind.LAST_NAME, "Lee")),
        ((None, None, None), DeleteSelector(SelectorKind.NONE)),
        (("", "", ""), DeleteSelector(SelectorKind.NONE)),
    ],
)
def test_delete_selector_resolution(args, expected):
    assert DeleteSelector.resolve(*args) == expected


@pytest.mark.anyio
async def test_delete_without_selector(repo):
    with pytest.raises(InvalidRequestError):
        await UserService(repo).delete_users(DeleteSelector(SelectorKind.NONE))


@pytest.mark.anyio
async def test_batch_delete_stops_without_rollback(sessionmaker):
    repo = FailingDeleteRepository(sessionmaker, fail_on="u2")
    for user_id in ("u1", "u2", "u3"):
        await repo.put(user(user_id, "Ann", "Lee"))

    with pytest.raises(StoreError):
        await UserService(repo).delete_users(DeleteSelector(SelectorKind.FIRST_NAME, "Ann"))

    assert await repo.get("u1") is None
    assert await repo.get("u2") is not None
    assert await repo.get("u3") is not None


@pytest.mark.anyio
async def test_update_ignores_body_id(repo):
    body = user("body-id", "Ann", "Lee").model_dump_json(by_alias=True).encode()
    updated = await UserService(repo).update_user("path-id", body)
    assert updated.user_id == "path-id"
    assert await repo.get("body-id") is None


@pytest.mark.anyio
async def test_sorted_listing_is_stable(repo):
    for record in (user("a", "Ann", "Lee"), user("b", "Ann", "Kim"), user("c", "Ann", "Lee"), user("d", "Al", "Zu")):
        await repo.put(record)

    users = await ListingService(repo).list_users(sort=True)
    assert [u.user_id for u in users] == ["d", "b", "a", "c"]


@pytest.mark.anyio
async def test_listing_not_found(repo):
    with pytest.raises(NotFoundError):
        await ListingService(repo).resolve({"name": "Ann"})
