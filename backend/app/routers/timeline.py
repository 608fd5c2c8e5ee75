"""Era and timeline event API routes."""

from fastapi import APIRouter

from app.dependencies import PrincipalDep, TimelineServiceDep
from app.models import (
    Era,
    EraCreate,
    EraUpdate,
    ReorderRequest,
    TimelineEvent,
    TimelineEventCreate,
    TimelineEventUpdate,
)

router = APIRouter()


@router.get("/{project_id}/eras", response_model=list[Era])
async def list_eras(project_id: str, service: TimelineServiceDep, principal: PrincipalDep):
    return await service.list_eras(project_id, principal.id)


@router.post("/{project_id}/eras", response_model=Era, status_code=201)
async def create_era(
    project_id: str,
    body: EraCreate,
    service: TimelineServiceDep,
    principal: PrincipalDep,
):
    return await service.create_era(project_id, body, principal.id)


@router.post("/{project_id}/eras/reorder", response_model=list[Era])
async def reorder_eras(
    project_id: str,
    body: ReorderRequest,
    service: TimelineServiceDep,
    principal: PrincipalDep,
):
    return await service.reorder_eras(project_id, body.ordered_ids, principal.id)


@router.put("/{project_id}/eras/{era_id}", response_model=Era)
async def update_era(
    project_id: str,
    era_id: str,
    body: EraUpdate,
    service: TimelineServiceDep,
    principal: PrincipalDep,
):
    return await service.update_era(project_id, era_id, body, principal.id)


@router.delete("/{project_id}/eras/{era_id}")
async def delete_era(
    project_id: str,
    era_id: str,
    service: TimelineServiceDep,
    principal: PrincipalDep,
):
    await service.delete_era(project_id, era_id, principal.id)
    return {"status": "deleted", "id": era_id}


@router.get("/{project_id}/eras/{era_id}/events", response_model=list[TimelineEvent])
async def list_era_events(
    project_id: str,
    era_id: str,
    service: TimelineServiceDep,
    principal: PrincipalDep,
):
    return await service.list_era_events(project_id, era_id, principal.id)


@router.post("/{project_id}/eras/{era_id}/events", response_model=TimelineEvent, status_code=201)
async def create_event(
    project_id: str,
    era_id: str,
    body: TimelineEventCreate,
    service: TimelineServiceDep,
    principal: PrincipalDep,
):
    return await service.create_event(project_id, era_id, body, principal.id)


@router.post("/{project_id}/eras/{era_id}/events/reorder", response_model=list[TimelineEvent])
async def reorder_events(
    project_id: str,
    era_id: str,
    body: ReorderRequest,
    service: TimelineServiceDep,
    principal: PrincipalDep,
):
    return await service.reorder_events(project_id, era_id, body.ordered_ids, principal.id)


@router.get("/{project_id}/timeline", response_model=list[TimelineEvent])
async def list_events(project_id: str, service: TimelineServiceDep, principal: PrincipalDep):
    return await service.list_events(project_id, principal.id)


@router.put("/{project_id}/timeline/{event_id}", response_model=TimelineEvent)
async def update_event(
    project_id: str,
    event_id: str,
    body: TimelineEventUpdate,
    service: TimelineServiceDep,
    principal: PrincipalDep,
):
    return await service.update_event(project_id, event_id, body, principal.id)


@router.delete("/{project_id}/timeline/{event_id}")
async def delete_event(
    project_id: str,
    event_id: str,
    service: TimelineServiceDep,
    principal: PrincipalDep,
):
    await service.delete_event(project_id, event_id, principal.id)
    return {"status": "deleted", "id": event_id}
