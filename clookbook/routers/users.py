"""
Users Router

Endpoints:
- GET /me - Current user's profile
"""

from fastapi import APIRouter

from clookbook.dependencies import CurrentUser
from clookbook.schemas.user import MeResponse, UserResponse

router = APIRouter(
    tags=["Users"],
    responses={
        401: {"description": "Not authenticated"},
    },
)


@router.get(
    "/me",
    response_model=MeResponse,
    summary="Get current user profile",
    description="Get the authenticated user's id, email and signup date.",
)
def get_me(current_user: CurrentUser) -> MeResponse:
    return MeResponse(user=UserResponse.model_validate(current_user))
