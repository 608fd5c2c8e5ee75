"""Writing entry endpoints."""

from fastapi import APIRouter

from app.dependencies import EntityServiceDep, PrincipalDep
from app.models import WritingEntry, WritingCreate, WritingUpdate

router = APIRouter()


@router.post("/{project_id}/writings", response_model=WritingEntry, status_code=201)
async def create_writing(
    project_id: str,
    body: WritingCreate,
    service: EntityServiceDep,
    principal: PrincipalDep,
):
    return await service.create_writing(project_id, body, principal.id)


@router.get("/{project_id}/writings", response_model=list[WritingEntry])
async def list_writings(project_id: str, service: EntityServiceDep, principal: PrincipalDep):
    return await service.list_writings(project_id, principal.id)


@router.put("/{project_id}/writings/{writing_id}", response_model=WritingEntry)
async def update_writing(
    project_id: str,
    writing_id: str,
    body: WritingUpdate,
    service: EntityServiceDep,
    principal: PrincipalDep,
):
    return await service.update_writing(project_id, writing_id, body, principal.id)


@router.delete("/{project_id}/writings/{writing_id}")
async def delete_writing(
    project_id: str,
    writing_id: str,
    service: EntityServiceDep,
    principal: PrincipalDep,
):
    await service.delete_writing(project_id, writing_id, principal.id)
    return {"status": "deleted", "id": writing_id}
