from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import PlainTextResponse

from contacts_api.errors import INVALID_PATH, InvalidRequestError
from contacts_api.repositories.factory import get_user_repository
from contacts_api.repositories.user_repo import UserRepository
from contacts_api.schemas.user import dump_user
from contacts_api.services.user_service import DeleteSelector, SelectorKind, UserService

router = APIRouter(redirect_slashes=False)


def get_user_service(repo: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(repo)


@router.get("/{user_id}")
async def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    user = await service.get_user(user_id)
    return Response(content=dump_user(user), media_type="application/json")


@router.post("", status_code=201)
async def create_user(request: Request, service: UserService = Depends(get_user_service)):
    await service.create_user(await request.body())
    return PlainTextResponse("user saved successfully", status_code=201)


@router.patch("/{user_id}", status_code=201)
async def update_user(user_id: str, request: Request, service: UserService = Depends(get_user_service)):
    await service.update_user(user_id, await request.body())
    return PlainTextResponse("user updated successfully", status_code=201)


@router.delete("")
async def delete_users(
    request: Request,
    user_id: str | None = Query(None, alias="userID"),
    first_name: str | None = Query(None, alias="firstName"),
    last_name: str | None = Query(None, alias="lastName"),
    service: UserService = Depends(get_user_service),
):
    if not request.query_params:
        raise InvalidRequestError(INVALID_PATH)
    selector = DeleteSelector.resolve(user_id, first_name, last_name)
    deleted = await service.delete_users(selector)
    if selector.kind is SelectorKind.USER_ID:
        return PlainTextResponse("user deleted successfully", status_code=200)
    return PlainTextResponse(f"{deleted} items deleted successfully", status_code=201)
