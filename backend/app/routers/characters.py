"""Character endpoints."""

from fastapi import APIRouter

from app.dependencies import EntityServiceDep, PrincipalDep
from app.models import Character, CharacterCreate, CharacterUpdate

router = APIRouter()


@router.post("/{project_id}/characters", response_model=Character, status_code=201)
async def create_character(
    project_id: str,
    body: CharacterCreate,
    service: EntityServiceDep,
    principal: PrincipalDep,
):
    return await service.create_character(project_id, body, principal.id)


@router.get("/{project_id}/characters", response_model=list[Character])
async def list_characters(project_id: str, service: EntityServiceDep, principal: PrincipalDep):
    return await service.list_characters(project_id, principal.id)


@router.put("/{project_id}/characters/{character_id}", response_model=Character)
async def update_character(
    project_id: str,
    character_id: str,
    body: CharacterUpdate,
    service: EntityServiceDep,
    principal: PrincipalDep,
):
    return await service.update_character(project_id, character_id, body, principal.id)


@router.delete("/{project_id}/characters/{character_id}")
async def delete_character(
    project_id: str,
    character_id: str,
    service: EntityServiceDep,
    principal: PrincipalDep,
):
    await service.delete_character(project_id, character_id, principal.id)
    return {"status": "deleted", "id": character_id}
