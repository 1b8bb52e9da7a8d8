from fastapi import APIRouter, Depends
from order_tracker.auth import create_token
from order_tracker.schemas.auth import LoginRequest, LoginResponse
from order_tracker.services.user_service import UserService
from order_tracker.store import get_user_service

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest, users: UserService = Depends(get_user_service)):
    """Exchange a username/password pair from the users sheet for a token."""
    role = await users.verify_credentials(body.username, body.password)
    return LoginResponse(token=create_token(body.username, role), role=role)
