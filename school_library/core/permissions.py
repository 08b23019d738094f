from fastapi import HTTPException, status, Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from ..database import get_context
from .security import verify_token

security = HTTPBearer(auto_error=False)


def require_admin(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    """Gate for admin-only routes.

    Declared per route with ``dependencies=[Depends(require_admin)]``. A missing
    bearer token is a 401, an invalid or expired one a 403. On success the
    decoded claims are left on ``request.state.admin``.
    """
    if not credentials or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token requerido",
            headers={"WWW-Authenticate": "Bearer"},
        )

    settings = get_context(request).settings
    claims = verify_token(credentials.credentials, settings.jwt_secret, settings.algorithm)
    if claims is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Token inválido",
        )

    request.state.admin = claims
    return claims
