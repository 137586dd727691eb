"""Conversion between :class:`User` and the store's attribute map.

The attribute map is the plain ``{"userID": "...", "firstName": "...", ...}``
dict that both backends read and write (the DynamoDB backend wraps each value
in its type descriptor before calling the client).
"""
from typing import Any, Mapping

from pydantic import ValidationError

from contacts_api.errors import RecordDecodeError
from contacts_api.schemas.user import User


def user_to_item(user: User) -> dict[str, str]:
    return user.model_dump(by_alias=True)


def item_to_user(item: Mapping[str, Any]) -> User:
    # absent attributes decode to "" like a missing JSON key;
    # attributes of another type (numbers, sets...) are an error
    try:
        return User.model_validate(dict(item))
    except ValidationError as exc:
        raise RecordDecodeError() from exc


def items_to_users(items) -> list[User]:
    return [item_to_user(item) for item in items]
