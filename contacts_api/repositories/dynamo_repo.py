import logging

from boto3.dynamodb.conditions import ConditionExpressionBuilder, Key
from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from botocore.exceptions import BotoCoreError, ClientError
from starlette.concurrency import run_in_threadpool

from contacts_api.errors import StoreError
from contacts_api.repositories.mapping import item_to_user, items_to_users, user_to_item
from contacts_api.repositories.user_repo import UserRepository
from contacts_api.schemas.user import User

logger = logging.getLogger(__name__)

PRIMARY_KEY = "userID"

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()


def serialize_item(item: dict) -> dict:
    return {key: _serializer.serialize(value) for key, value in item.items()}


def deserialize_item(item: dict) -> dict:
    return {key: _deserializer.deserialize(value) for key, value in item.items()}


class DynamoUserRepository(UserRepository):
    """User store on a DynamoDB table.

    Uses the low-level client rather than a ``Table`` resource: clients are
    thread-safe, and every blocking call runs in Starlette's threadpool.
    Query and scan read a single page.
    """

    def __init__(self, client, table_name: str, **index_names):
        super().__init__(**index_names)
        self.client = client
        self.table_name = table_name

    async def _call(self, operation: str, **kwargs) -> dict:
        logger.debug("dynamodb %s on %s: %s", operation, self.table_name, kwargs)
        try:
            return await run_in_threadpool(
                getattr(self.client, operation), TableName=self.table_name, **kwargs
            )
        except (ClientError, BotoCoreError) as exc:
            logger.exception("dynamodb %s failed", operation)
            raise StoreError() from exc

    async def get(self, user_id: str) -> User | None:
        result = await self._call("get_item", Key=serialize_item({PRIMARY_KEY: user_id}))
        item = result.get("Item")
        if item is None:
            return None
        return item_to_user(deserialize_item(item))

    async def put(self, user: User) -> None:
        await self._call("put_item", Item=serialize_item(user_to_item(user)))

    async def delete(self, user_id: str) -> None:
        await self._call("delete_item", Key=serialize_item({PRIMARY_KEY: user_id}))

    async def query(self, index_name: str, field: str, value: str) -> list[User]:
        condition = ConditionExpressionBuilder().build_expression(Key(field).eq(value), is_key_condition=True)
        result = await self._call(
            "query",
            IndexName=index_name,
            KeyConditionExpression=condition.condition_expression,
            ExpressionAttributeNames=condition.attribute_name_placeholders,
            ExpressionAttributeValues=serialize_item(condition.attribute_value_placeholders),
        )
        return self._users(result)

    async def scan(self) -> list[User]:
        return self._users(await self._call("scan"))

    @staticmethod
    def _users(result: dict) -> list[User]:
        return items_to_users(deserialize_item(item) for item in result.get("Items", []))
