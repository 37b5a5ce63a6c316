"""
Authentication API routes.

- POST /auth/register - Create account
- POST /auth/login - Exchange username/password for a JWT
"""

from fastapi import APIRouter, Depends, status

from talardnad.application.use_cases.login_user import LoginUser
from talardnad.application.use_cases.register_user import (
    RegisterUser,
    RegisterUserCommand,
)
from talardnad.di.dependencies import (
    get_jwt_handler,
    get_login_user,
    get_register_user,
)
from talardnad.infrastructure.auth.jwt_handler import JWTHandler
from talardnad.infrastructure.monitoring import metrics
from talardnad.presentation.schemas.auth_schemas import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
)
from talardnad.presentation.schemas.user_schemas import UserResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
)
async def register(
    request: RegisterRequest,
    use_case: RegisterUser = Depends(get_register_user),
) -> UserResponse:
    """
    Register a new account.

    Errors:
    - 400 if username or email is taken
    - 422 if fields are invalid
    """
    user = await use_case.execute(
        RegisterUserCommand(
            username=request.username,
            email=request.email,
            password=request.password,
            first_name=request.first_name,
            last_name=request.last_name,
        )
    )
    metrics.users_registered_total.inc()

    return UserResponse.from_entity(user)


@router.post(
    "/login",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
    summary="Log in",
)
async def login(
    request: LoginRequest,
    use_case: LoginUser = Depends(get_login_user),
    jwt_handler: JWTHandler = Depends(get_jwt_handler),
) -> LoginResponse:
    """
    Verify credentials and issue an access token.

    Errors:
    - 401 if username or password is wrong
    """
    user = await use_case.execute(request.username, request.password)

    access_token = jwt_handler.create_access_token(
        user_id=user.id,
        username=user.username,
    )

    return LoginResponse(
        access_token=access_token,
        token_type="bearer",
        expires_in=jwt_handler.expiration_hours * 3600,
        user=UserResponse.from_entity(user),
    )
