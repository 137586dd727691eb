from sqlalchemy import Column, String

from contacts_api.database import Base


class UserRecord(Base):
    __tablename__ = "users_contact_info"

    user_id = Column("userID", String(255), primary_key=True)
    first_name = Column("firstName", String(255), nullable=False, index=True)
    last_name = Column("lastName", String(255), nullable=False, index=True)
    address = Column("address", String(1024), nullable=False)
    mobile_number = Column("mobileNumber", String(64), nullable=False)
    email_address = Column("emailAddress", String(320), nullable=False)

    @classmethod
    def from_item(cls, item: dict[str, str]) -> "UserRecord":
        return cls(**{attr: item[column.name] for attr, column in _columns().items()})

    def to_item(self) -> dict[str, str]:
        return {column.name: getattr(self, attr) for attr, column in _columns().items()}


def _columns():
    """ORM attribute name -> Column, e.g. ``first_name`` -> ``firstName``."""
    return {prop.key: prop.columns[0] for prop in UserRecord.__mapper__.column_attrs}
