"""
Dependency injection for FastAPI routes.

Provides typed service dependencies that enable IDE navigation (Ctrl+Click).
"""

from typing import Annotated
from fastapi import Depends, HTTPException, Request

from app.models import Principal
from app.services.entities import EntityService
from app.services.projects import ProjectService
from app.services.timeline import TimelineService


def get_project_service(request: Request) -> ProjectService:
    return request.app.state.project_service


def get_entity_service(request: Request) -> EntityService:
    return request.app.state.entity_service


def get_timeline_service(request: Request) -> TimelineService:
    return request.app.state.timeline_service


def get_principal(request: Request) -> Principal:
    principal = getattr(request.state, "principal", None)
    if principal is None:
        raise HTTPException(401, "Not authenticated")
    return principal


ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
EntityServiceDep = Annotated[EntityService, Depends(get_entity_service)]
TimelineServiceDep = Annotated[TimelineService, Depends(get_timeline_service)]
PrincipalDep = Annotated[Principal, Depends(get_principal)]
