"""Endpoints about the calling user."""

from fastapi import APIRouter

from app.dependencies import PrincipalDep, ProjectServiceDep
from app.models import UserData

router = APIRouter()


@router.get("/data", response_model=UserData)
async def get_user_data(service: ProjectServiceDep, principal: PrincipalDep):
    return await service.get_user_data(principal)
