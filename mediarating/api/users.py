# mediarating/api/users.py

from typing import List, Optional
from fastapi import APIRouter, Depends, Path, Query, Request, Response, status
from mediarating.core.dependencies import (
    security,
    authorize_request,
    get_auth_service,
    get_current_user_id,
    get_favorite_service,
    get_media_service,
    get_rating_service,
    get_user_service,
)
from mediarating.core.auth import owns
from mediarating.core.exceptions import ForbiddenError
from mediarating.schemas.media import MediaEntry, RankedMedia
from mediarating.schemas.rating import Rating
from mediarating.schemas.user import (
    User,
    UserCredentials,
    RegisterResponse,
    TokenResponse,
    UserProfileUpdate,
)
from mediarating.services.auth_service import AuthService
from mediarating.services.favorite_service import FavoriteService
from mediarating.services.media_service import MediaService
from mediarating.services.rating_service import RatingService
from mediarating.services.user_service import UserService

router = APIRouter()


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register",
    description="Creates an account. Usernames are unique; passwords have a minimum length.",
)
def register(
    credentials: UserCredentials,
    auth_service: AuthService = Depends(get_auth_service),
):
    user = auth_service.register(credentials.username, credentials.password)
    return RegisterResponse(id=user.user_id, username=user.username)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Log in",
    description="Checks the credentials and issues a bearer token valid for seven days.",
)
def login(
    credentials: UserCredentials,
    auth_service: AuthService = Depends(get_auth_service),
):
    token = auth_service.login(credentials.username, credentials.password)
    return TokenResponse(token=token)


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(security)],
    summary="Log out",
    description="Revokes the bearer token used for this request.",
)
def logout(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
):
    auth_service.logout(request.headers.get("Authorization"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/profile", response_model=User, summary="Own profile")
def get_own_profile(
    current_user_id: int = Depends(get_current_user_id),
    user_service: UserService = Depends(get_user_service),
):
    return user_service.require_user(current_user_id)


# /users/{user_id}/...: an unknown user is 404 before the token is looked at


@router.get(
    "/{user_id}/profile",
    response_model=User,
    dependencies=[Depends(security)],
    summary="User profile",
)
def get_profile(
    request: Request,
    user_id: int = Path(description="User ID"),
    user_service: UserService = Depends(get_user_service),
    auth_service: AuthService = Depends(get_auth_service),
):
    user = user_service.require_user(user_id)
    authorize_request(request, auth_service)
    return user


@router.put(
    "/{user_id}/profile",
    response_model=User,
    dependencies=[Depends(security)],
    summary="Update profile",
    description="Changes email and/or favorite genre. Only the user themselves may do this.",
)
def update_profile(
    request: Request,
    profile: UserProfileUpdate,
    user_id: int = Path(description="User ID"),
    user_service: UserService = Depends(get_user_service),
    auth_service: AuthService = Depends(get_auth_service),
):
    user_service.require_user(user_id)
    current_user_id = authorize_request(request, auth_service)
    if not owns(current_user_id, user_id):
        raise ForbiddenError("You can only edit your own profile")
    return user_service.update_profile(user_id, profile)


@router.get(
    "/{user_id}/ratings",
    response_model=List[Rating],
    dependencies=[Depends(security)],
    summary="User rating history",
)
def get_user_ratings(
    request: Request,
    user_id: int = Path(description="User ID"),
    user_service: UserService = Depends(get_user_service),
    auth_service: AuthService = Depends(get_auth_service),
    rating_service: RatingService = Depends(get_rating_service),
):
    user_service.require_user(user_id)
    authorize_request(request, auth_service)
    return rating_service.list_user_ratings(user_id)


@router.get(
    "/{user_id}/favorites",
    response_model=List[MediaEntry],
    dependencies=[Depends(security)],
    summary="User favorites",
)
def get_user_favorites(
    request: Request,
    user_id: int = Path(description="User ID"),
    user_service: UserService = Depends(get_user_service),
    auth_service: AuthService = Depends(get_auth_service),
    favorite_service: FavoriteService = Depends(get_favorite_service),
):
    user_service.require_user(user_id)
    authorize_request(request, auth_service)
    return favorite_service.list_favorites(user_id)


@router.get(
    "/{user_id}/recommendations",
    response_model=List[RankedMedia],
    dependencies=[Depends(security)],
    summary="Recommendations for a user",
    description="type=content (default) or genre. Only the user themselves may ask.",
)
def get_user_recommendations(
    request: Request,
    user_id: int = Path(description="User ID"),
    rec_type: Optional[str] = Query(default=None, alias="type", description="content or genre"),
    limit: Optional[int] = Query(default=None, description="Number of entries (1 ~ 100)"),
    user_service: UserService = Depends(get_user_service),
    auth_service: AuthService = Depends(get_auth_service),
    media_service: MediaService = Depends(get_media_service),
):
    user_service.require_user(user_id)
    current_user_id = authorize_request(request, auth_service)
    if not owns(current_user_id, user_id):
        raise ForbiddenError("You can only view your own recommendations")
    return media_service.get_recommendations(user_id, limit, rec_type)
