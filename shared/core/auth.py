from datetime import datetime, timedelta
from fastapi import HTTPException, status, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt

from shared.core.config import settings
from shared.core.schemas import JsonOutResult, UserToken
from shared.utils.app_status_code import AppStatusCode

security = HTTPBearer()


def create_access_token(data: dict) -> str:
    payload = data.copy()
    expires = datetime.utcnow() + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload["exp"] = expires

    if "name" not in payload and "full_name" in payload:
        payload["name"] = payload["full_name"]

    return jwt.encode(payload, settings.JWT_SECRET,
                      algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> UserToken:
    """Verify and decode a JWT token."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET,
                             algorithms=[settings.JWT_ALGORITHM])
        return UserToken(**payload)
    except (JWTError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=JsonOutResult(
                data=None,
                status="Failure",
                status_code=AppStatusCode.AUTHENTICATION_FAILED,
                message="Invalid or expired token"
            ).model_dump(),
            headers={"WWW-Authenticate": "Bearer"},
        )


def validate_current_token(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> UserToken:
    # user_id in the token is the owner every record is scoped to
    return verify_token(credentials.credentials)
