from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.token_service import JwtTokenService
from src.app.services.token_service import TokenService, TokenClaims, InvalidTokenError
from src.app.use_cases.errors import ErrorCode
from src.api.error import ClientError

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

bearer_scheme = HTTPBearer(auto_error=False)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def get_config(request: Request):
    return getattr(request.app.state, "config", ApplicationConfig)


def get_token_service(config=Depends(get_config)) -> TokenService:
    return JwtTokenService(
        secret=config.JWT_SECRET,
        algorithm=config.JWT_ALGORITHM,
        expire_hours=config.TOKEN_EXPIRE_HOURS,
    )


async def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    token_service: TokenService = Depends(get_token_service),
) -> TokenClaims:
    """Guard for protected routes: a valid, unexpired bearer token or 401."""
    if credentials is None or not credentials.credentials:
        raise ClientError(
            Error(
                code=ErrorCode.UNAUTHORIZED,
                message="Authentication required",
                reason="Missing bearer token",
            )
        )

    try:
        return token_service.verify(credentials.credentials)
    except InvalidTokenError as e:
        raise ClientError(
            Error(
                code=ErrorCode.UNAUTHORIZED,
                message="Invalid or expired token",
                reason=str(e),
            )
        )
