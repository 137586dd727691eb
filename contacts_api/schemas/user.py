from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic_core import PydanticSerializationError

from contacts_api.errors import SerializationError

REQUIRED_FIELDS = ("user_id", "first_name", "last_name", "address", "mobile_number", "email_address")


class User(BaseModel):
    """A user contact record.

    Serialized with the camelCase wire names (``userID``, ``firstName``...).
    Keys missing from the input default to an empty string; :meth:`missing_fields`
    reports them so that writes can be rejected.
    """

    model_config = ConfigDict(frozen=True)

    user_id: str = Field("", alias="userID")
    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")
    address: str = Field("", alias="address")
    mobile_number: str = Field("", alias="mobileNumber")
    email_address: str = Field("", alias="emailAddress")

    def missing_fields(self) -> list[str]:
        return [
            type(self).model_fields[name].alias
            for name in REQUIRED_FIELDS
            if not getattr(self, name)
        ]

    def sort_key(self) -> tuple[str, str]:
        return (self.first_name, self.last_name)


_user_list = TypeAdapter(list[User])


def dump_user(user: User) -> bytes:
    try:
        return user.model_dump_json(by_alias=True).encode()
    except PydanticSerializationError as exc:
        raise SerializationError("could not encode user") from exc


def dump_users(users: list[User]) -> bytes:
    try:
        return _user_list.dump_json(users, by_alias=True)
    except PydanticSerializationError as exc:
        raise SerializationError("could not marshal list of users") from exc
