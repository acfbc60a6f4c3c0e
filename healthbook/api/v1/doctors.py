from fastapi import APIRouter, Depends
from typing import List

from ...api.deps import get_auth_service, get_current_identity
from ...services.auth_service import AuthService
from ...schemas.auth import UserResponse

router = APIRouter(prefix="/doctors", tags=["Doctors"])

@router.get("", response_model=List[UserResponse], dependencies=[Depends(get_current_identity)])
async def list_doctors(
    auth_service: AuthService = Depends(get_auth_service)
):
    """Registered doctors, for the booking form."""
    return auth_service.list_doctors()
