import logging
from datetime import datetime, timedelta
from typing import Optional

from jose import jwt, JWTError, ExpiredSignatureError
from fastapi.security import OAuth2PasswordBearer
from fastapi import Depends, HTTPException, status

from database import UserORM
from database.db import get_db
from sqlalchemy.orm import Session
from config import settings
from core.exceptions import ForbiddenException
from core.security import Role, RolePredicate, has_role, check_predicate

logger = logging.getLogger(__name__)

# auto_error=False: la cadena de autorización decide si falta el token
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token", auto_error=False)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token including standard claims (sub, iat, exp, iss, aud).

    `data` should include an identifier under the "sub" key (user id).
    """
    to_encode = data.copy()
    now = datetime.utcnow()
    expire = now + (expires_delta or timedelta(minutes=settings.jwt_access_minutes))
    if "sub" not in to_encode:
        raise ValueError("`data` must include `sub` (subject / user id)")
    to_encode["sub"] = str(to_encode["sub"])
    to_encode.update({
        "exp": expire,
        "iat": now,
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience
    })
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict:
    """Decode and validate a JWT token.

    Validates signature, expiration, issuer and audience. Raises HTTPException(401)
    for any invalid token state.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
        )
        return payload
    except ExpiredSignatureError:
        logger.info("Token expirado")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token expired")
    except JWTError as e:
        logger.info(f"Token inválido o claim mismatch: {e}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token")


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(token: Optional[str], db: Session) -> UserORM:
    """Resolve the bearer token into an enabled UserORM or raise 401."""
    if not token:
        raise _unauthorized("Not authenticated")
    payload = decode_token(token)
    user_id = payload.get("sub")
    if not user_id:
        raise _unauthorized("Invalid token: missing sub")
    user = db.get(UserORM, int(user_id))
    if not user:
        raise _unauthorized("User not found")
    if not user.enabled:
        raise _unauthorized("User is disabled")
    return user


def authorize(predicate: RolePredicate):
    """Dependency factory for the authorization chain.

    Runs before the handler body: authenticates the bearer token and evaluates
    `predicate` against the user. Returns the user, or None when security is
    disabled in settings.

    Usage on a router: APIRouter(dependencies=[Depends(authorize(has_role(Role.owner_admin)))])
    """

    def _dependency(token: Optional[str] = Depends(oauth2_scheme), db: Session = Depends(get_db)):
        if not settings.security_enabled:
            return None
        user = get_current_user(token, db)
        try:
            check_predicate(user, predicate)
        except ForbiddenException as e:
            logger.info(f"Acceso denegado a {user.username}: {e.details}")
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message)
        return user

    return _dependency


def require_roles(*allowed_roles: Role):
    """Shortcut for authorize(has_role(*allowed_roles))."""
    return authorize(has_role(*allowed_roles))
