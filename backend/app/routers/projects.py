"""Project management endpoints."""

from fastapi import APIRouter

from app.dependencies import PrincipalDep, ProjectServiceDep
from app.models import Project, ProjectCreate, ProjectUpdate

router = APIRouter()


@router.get("/", response_model=list[Project])
async def list_projects(service: ProjectServiceDep, principal: PrincipalDep):
    return await service.list_projects(principal.id)


@router.post("/", response_model=Project, status_code=201)
async def create_project(body: ProjectCreate, service: ProjectServiceDep, principal: PrincipalDep):
    return await service.create_project(body, principal.id)


@router.get("/{project_id}", response_model=Project)
async def get_project(project_id: str, service: ProjectServiceDep, principal: PrincipalDep):
    return await service.get_project(project_id, principal.id)


@router.put("/{project_id}", response_model=Project)
async def update_project(
    project_id: str,
    body: ProjectUpdate,
    service: ProjectServiceDep,
    principal: PrincipalDep,
):
    return await service.update_project(project_id, body, principal.id)


@router.delete("/{project_id}")
async def delete_project(project_id: str, service: ProjectServiceDep, principal: PrincipalDep):
    await service.delete_project(project_id, principal.id)
    return {"status": "deleted", "id": project_id}
