"""Catalogue endpoints."""

from fastapi import APIRouter

from app.dependencies import EntityServiceDep, PrincipalDep
from app.models import CatalogueItem, CatalogueItemCreate, CatalogueItemUpdate

router = APIRouter()


@router.post("/{project_id}/catalogue", response_model=CatalogueItem, status_code=201)
async def create_catalogue_item(
    project_id: str,
    body: CatalogueItemCreate,
    service: EntityServiceDep,
    principal: PrincipalDep,
):
    return await service.create_catalogue_item(project_id, body, principal.id)


@router.get("/{project_id}/catalogue", response_model=list[CatalogueItem])
async def list_catalogue_items(project_id: str, service: EntityServiceDep, principal: PrincipalDep):
    return await service.list_catalogue_items(project_id, principal.id)


@router.put("/{project_id}/catalogue/{item_id}", response_model=CatalogueItem)
async def update_catalogue_item(
    project_id: str,
    item_id: str,
    body: CatalogueItemUpdate,
    service: EntityServiceDep,
    principal: PrincipalDep,
):
    return await service.update_catalogue_item(project_id, item_id, body, principal.id)


@router.delete("/{project_id}/catalogue/{item_id}")
async def delete_catalogue_item(
    project_id: str,
    item_id: str,
    service: EntityServiceDep,
    principal: PrincipalDep,
):
    await service.delete_catalogue_item(project_id, item_id, principal.id)
    return {"status": "deleted", "id": item_id}
