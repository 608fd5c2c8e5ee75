"""World endpoints."""

from fastapi import APIRouter

from app.dependencies import EntityServiceDep, PrincipalDep
from app.models import World, WorldCreate, WorldUpdate

router = APIRouter()


@router.post("/{project_id}/worlds", response_model=World, status_code=201)
async def create_world(
    project_id: str,
    body: WorldCreate,
    service: EntityServiceDep,
    principal: PrincipalDep,
):
    return await service.create_world(project_id, body, principal.id)


@router.get("/{project_id}/worlds", response_model=list[World])
async def list_worlds(project_id: str, service: EntityServiceDep, principal: PrincipalDep):
    return await service.list_worlds(project_id, principal.id)


@router.put("/{project_id}/worlds/{world_id}", response_model=World)
async def update_world(
    project_id: str,
    world_id: str,
    body: WorldUpdate,
    service: EntityServiceDep,
    principal: PrincipalDep,
):
    return await service.update_world(project_id, world_id, body, principal.id)


@router.delete("/{project_id}/worlds/{world_id}")
async def delete_world(
    project_id: str,
    world_id: str,
    service: EntityServiceDep,
    principal: PrincipalDep,
):
    await service.delete_world(project_id, world_id, principal.id)
    return {"status": "deleted", "id": world_id}
