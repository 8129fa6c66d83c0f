import time
from typing import Any

from authlib.common.security import generate_token
from authlib.jose import JoseError, jwt
from fastapi import HTTPException
from loguru import logger

from src.orders_api.entities.core.user import User
from src.orders_api.entities.service.customer import Customer
from src.orders_api.runtime.config.config_data import ConfigData
from src.orders_api.runtime.context import get_config

_REGISTERED_CLAIMS = {"iss", "sub", "aud", "exp", "iat", "nbf", "jti"}


class JwtGeneratorService:
    """Service for issuing signed tokens to authenticated users and customers."""

    def __init__(self, config: ConfigData | None = None):
        self._config = config

    def generate_jwt(
        self,
        subject: str,
        claims: dict[str, Any] | None = None,
        expires_in_seconds: int | None = None,
        algorithm: str = "HS256",
        secret: str | None = None,
    ) -> str:
        """Generate a signed JWT using authlib.

        Args:
            subject: Subject (sub) claim, the record key
            claims: Additional claims; registered claim names are ignored
            expires_in_seconds: Token lifetime (defaults to config, 4 hours)
            algorithm: Signing algorithm (default: HS256)
            secret: Signing secret (defaults to config)

        Returns:
            Signed JWT token string

        Raises:
            HTTPException: If configuration is missing or invalid
        """
        config: ConfigData = self._config or get_config()

        secret = secret or config.jwt.signing_secret
        if not secret:
            raise HTTPException(status_code=500, detail="JWT signing secret not configured")

        if algorithm not in config.jwt.allowed_algorithms:
            logger.debug(
                "Attempted to use disallowed algorithm: {}, only {} are allowed",
                algorithm,
                config.jwt.allowed_algorithms,
            )
            raise HTTPException(status_code=500, detail=f"Algorithm {algorithm} not allowed")

        now = int(time.time())
        lifetime = expires_in_seconds or config.jwt.expires_in_seconds
        payload: dict[str, Any] = {
            "iss": config.jwt.gen_issuer,
            "sub": subject,
            "aud": config.jwt.audiences,
            "exp": now + lifetime,
            "iat": now,
            "nbf": now,
            "jti": generate_token(16),
        }
        if claims:
            payload.update({k: v for k, v in claims.items() if k not in _REGISTERED_CLAIMS})

        try:
            token = jwt.encode({"alg": algorithm, "typ": "JWT"}, payload, secret)
        except JoseError as e:
            raise HTTPException(status_code=500, detail=f"JWT encoding failed: {str(e)}") from e

        return token.decode() if isinstance(token, bytes) else token

    def generate_user_token(self, user: User) -> str:
        return self.generate_jwt(
            subject=str(user.key),
            claims={"email": user.email, "role": user.role, "name": user.name},
        )

    def generate_customer_token(self, customer: Customer) -> str:
        return self.generate_jwt(
            subject=str(customer.key),
            claims={"email": customer.email, "name": customer.name},
        )
