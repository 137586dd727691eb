from fastapi import APIRouter, Depends, Request, Response

from contacts_api.repositories.factory import get_user_repository
from contacts_api.repositories.user_repo import UserRepository
from contacts_api.schemas.user import dump_users
from contacts_api.services.listing_service import ListingService

router = APIRouter(redirect_slashes=False)


def get_listing_service(repo: UserRepository = Depends(get_user_repository)) -> ListingService:
    return ListingService(repo)


@router.get("")
async def list_users(request: Request, service: ListingService = Depends(get_listing_service)):
    """All users, ``?sorted=true`` for name order, or ``?name=`` to search."""
    users = await service.resolve(dict(request.query_params))
    return Response(content=dump_users(users), media_type="application/json")
