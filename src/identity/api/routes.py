"""FastAPI endpoints for the Identity domain."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from identity.api.schemas import AuthResponse, LoginRequest, SignupRequest, UserProfile
from identity.user.authentication import login
from identity.user.directory import Principal
from identity.user.registration import RegisterUser
from identity.user.tokens import issue_token
from identity.user.user import User
from shared.auth import require_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", status_code=201, response_model=AuthResponse)
async def signup(body: SignupRequest) -> AuthResponse:
    command = RegisterUser(
        username=body.username,
        email=body.email,
        phone=body.phone,
        password=body.password,
    )
    user_id = current_domain.process(command, asynchronous=False)
    user = current_domain.repository_for(User).get(user_id)
    return AuthResponse(
        message="User registered successfully",
        token=issue_token(user_id),
        user=UserProfile(**user.to_public_dict()),
    )


@router.post("/login", response_model=AuthResponse)
async def login_user(body: LoginRequest) -> AuthResponse:
    result = login(body.email, body.password)
    return AuthResponse(message="Login successful", token=result["token"], user=UserProfile(**result["user"]))


@router.get("/me", response_model=UserProfile)
async def me(principal: Principal = Depends(require_user)) -> UserProfile:
    user = current_domain.repository_for(User).get(principal.id)
    return UserProfile(**user.to_public_dict())
