"""Bearer token verification.

Tokens are issued by the account service; this module only decodes them
into a Principal. ``create_access_token`` exists for operational scripts
and tests.
"""

import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from pydantic import BaseModel, ValidationError

from device_warranty.config import get_settings
from device_warranty.domain.entities import Principal, UserRole

logger = logging.getLogger(__name__)


class TokenData(BaseModel):
    """Decoded JWT payload."""

    sub: str
    role: UserRole = UserRole.USER
    exp: datetime


def create_access_token(
    user_id: int,
    role: UserRole,
    expires_delta: timedelta = timedelta(minutes=30),
) -> str:
    settings = get_settings()
    payload = {
        "sub": str(user_id),
        "role": role.value,
        "exp": datetime.now(timezone.utc) + expires_delta,
        "iat": datetime.now(timezone.utc),
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Principal | None:
    """Verify signature and expiry. Returns None for any invalid token."""
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
        data = TokenData(**payload)
        return Principal(user_id=int(data.sub), role=data.role)
    except (JWTError, ValidationError, ValueError) as e:
        logger.debug("Rejected bearer token: %s", e)
        return None
