from fastapi import APIRouter, Depends

from app.core.auth import get_current_roles, require_user
from app.models.user import User
from app.schemas.user import MeRead

router = APIRouter(prefix="/me", tags=["me"])


@router.get("", response_model=MeRead)
def get_me(
    current_user: User = Depends(require_user),
    roles: set[str] = Depends(get_current_roles),
):
    """
    Get the authenticated caller and their roles.
    The user row is created on first authenticated request by the auth layer.
    """
    return MeRead(
        id=current_user.id,
        email=current_user.email,
        external_auth_provider=current_user.external_auth_provider,
        admin=current_user.admin,
        roles=sorted(roles),
    )
