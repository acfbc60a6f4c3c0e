from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from typing import Optional

from ..core.config import Settings, get_settings
from ..core.database import get_db
from ..core.exceptions import Unauthenticated, PermissionDenied
from ..core.security import security, TokenClaims, TokenIssuer, UserRole
from ..services.appointment_service import AppointmentService
from ..services.auth_service import AuthService

def get_token_issuer(config: Settings = Depends(get_settings)) -> TokenIssuer:
    return TokenIssuer(config)

def get_auth_service(
    db: Session = Depends(get_db),
    config: Settings = Depends(get_settings)
) -> AuthService:
    return AuthService(db, config)

def get_appointment_service(
    db: Session = Depends(get_db),
    config: Settings = Depends(get_settings)
) -> AppointmentService:
    return AppointmentService(db, config)

async def get_current_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    issuer: TokenIssuer = Depends(get_token_issuer)
) -> TokenClaims:
    """
    Access gate: resolve the caller from the Authorization header.

    No header at all is a 401. A header that is not a verifiable bearer
    token is a 403. The role claim is trusted as signed; the user record is
    not re-read.
    """
    if not request.headers.get("Authorization"):
        raise Unauthenticated()

    # HTTPBearer yields None for a non-Bearer scheme or an empty token
    token = credentials.credentials if credentials else ""
    return issuer.verify(token)

# Role-based access control
def require_role(*allowed_roles: UserRole, strict_only: bool = False):
    """
    Create a dependency that requires one of allowed_roles.

    With strict_only, the check is skipped unless STRICT_APPOINTMENT_UPDATES
    is on.
    """
    async def role_checker(
        identity: TokenClaims = Depends(get_current_identity),
        config: Settings = Depends(get_settings)
    ) -> TokenClaims:
        if strict_only and not config.STRICT_APPOINTMENT_UPDATES:
            return identity
        if identity.role not in allowed_roles:
            raise PermissionDenied(
                f"Access denied. Required roles: {[role.value for role in allowed_roles]}"
            )
        return identity

    return role_checker
