"""PyJWT Token Service Implementation"""

from datetime import datetime, timedelta, timezone

import jwt

from src.app.services.token_service import (
    TokenService,
    IssuedToken,
    TokenClaims,
    InvalidTokenError,
)
from src.domain.admin import Admin


class JwtTokenService(TokenService):
    """
    JWT implementation of TokenService

    Claims: sub (admin id), username, iat, exp. No refresh tokens; an
    expired token means logging in again.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expire_hours: int = 24):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_delta = timedelta(hours=expire_hours)

    def issue(self, admin: Admin) -> IssuedToken:
        issued_at = datetime.now(timezone.utc)
        expires_at = issued_at + self.expires_delta
        payload = {
            "sub": admin.id,
            "username": admin.username,
            "iat": issued_at,
            "exp": expires_at,
        }
        token = jwt.encode(payload, self.secret, algorithm=self.algorithm)
        return IssuedToken(token=token, expires_at=expires_at)

    def verify(self, token: str) -> TokenClaims:
        if not token:
            raise InvalidTokenError("Missing token")

        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token expired") from e
        except jwt.PyJWTError as e:
            raise InvalidTokenError("Invalid token") from e

        return TokenClaims(subject=str(payload["sub"]), username=payload.get("username", ""))
