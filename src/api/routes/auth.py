"""Auth API Routes"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.invoice_request import LoginRequestSchema
from src.app.services.token_service import TokenService
from src.app.use_cases.auth import Login, LoginCommandDTO, TokenResponseDTO
from src.adapter.repositories.admin_repository import SqlAlchemyAdminRepository
from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.depends import get_session, get_token_service
from src.api.error import ClientError

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/login",
    response_model=TokenResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        400: {
            "description": "Missing username or password",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "VALIDATION_ERROR",
                            "message": "username and password are required"
                        }
                    }
                }
            }
        },
        401: {
            "description": "Invalid credentials",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVALID_CREDENTIALS",
                            "message": "Invalid username or password"
                        }
                    }
                }
            }
        }
    }
)
async def login(
    request: LoginRequestSchema,
    session: AsyncSession = Depends(get_session),
    token_service: TokenService = Depends(get_token_service),
):
    """
    Exchange admin credentials for a bearer token.

    The token is valid for 24 hours and must be sent as
    `Authorization: Bearer <token>` on every protected call.

    **Returns:**
    - 200: Token issued
    - 400: username or password missing
    - 401: Invalid username or password
    """
    use_case = Login(
        admin_repo=SqlAlchemyAdminRepository(session),
        password_hasher=BcryptPasswordHasher(),
        token_service=token_service,
    )
    result = await use_case.execute(
        LoginCommandDTO(username=request.username, password=request.password)
    )

    if result.is_err():
        raise ClientError(result.error)

    return result.value
