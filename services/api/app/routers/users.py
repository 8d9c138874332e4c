"""User signup and profile endpoints."""

from fastapi import APIRouter, Depends, status

from app.auth.dependencies import get_current_user
from app.dependencies.users import get_user_service
from app.schemas.user import SignupResponse, UserCreate, UserProfileResponse
from app.services.core.users import UserService

router = APIRouter(prefix="/user", tags=["users"])


@router.post(
    "/signup",
    response_model=SignupResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Invalid body or location"},
        status.HTTP_409_CONFLICT: {"description": "User already exists"},
    },
)
def signup(
    data: UserCreate,
    service: UserService = Depends(get_user_service),
) -> SignupResponse:
    """Register a new user located in Egypt and return an access token."""
    token = service.add_new_user(data)
    return SignupResponse(token=token)


@router.get(
    "/{user_id}",
    response_model=UserProfileResponse,
    dependencies=[Depends(get_current_user)],
    responses={
        status.HTTP_401_UNAUTHORIZED: {"description": "Missing or invalid token"},
        status.HTTP_404_NOT_FOUND: {"description": "User not found"},
    },
)
def get_user_profile(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserProfileResponse:
    """Get the public profile of a user. Requires a bearer token."""
    return service.get_user_profile(user_id)
