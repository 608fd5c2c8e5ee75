"""Timeline service for eras, events and their positional ordering."""

from app.errors import NotFoundError
from app.logging import get_logger
from app.models import (
    Era,
    EraCreate,
    EraUpdate,
    Project,
    ProjectCollection,
    TimelineEvent,
    TimelineEventCreate,
    TimelineEventUpdate,
)
from app.services.embedded import EmbeddedCollectionService, find_item
from app.services.ordering import apply_order, next_order, sort_by_order

logger = get_logger('services.timeline')


def _require_era(project: Project, era_id: str) -> Era:
    era = find_item(project, ProjectCollection.ERAS, era_id)
    if era is None:
        raise NotFoundError(f'Era with ID "{era_id}" not found in this project.')
    return era


class TimelineService(EmbeddedCollectionService):
    """
    Eras are ordered within a project and events within their era.

    New items always append after the current last position. Deleting an era
    leaves its events in place.
    """

    # --- Eras ---

    async def create_era(self, project_id: str, data: EraCreate, principal_id: str) -> Era:
        project = await self._load(project_id, principal_id)
        return await self._create_item(
            project, ProjectCollection.ERAS, Era, data,
            order=next_order(project.eras),
        )

    async def list_eras(self, project_id: str, principal_id: str) -> list[Era]:
        return await self._list_items(project_id, ProjectCollection.ERAS, principal_id)

    async def update_era(
        self,
        project_id: str,
        era_id: str,
        data: EraUpdate,
        principal_id: str,
    ) -> Era:
        return await self._update_item(project_id, ProjectCollection.ERAS, era_id, data, principal_id)

    async def delete_era(self, project_id: str, era_id: str, principal_id: str) -> None:
        await self._delete_item(project_id, ProjectCollection.ERAS, era_id, principal_id)

    async def reorder_eras(self, project_id: str, ordered_ids: list[str], principal_id: str) -> list[Era]:
        project = await self._load(project_id, principal_id)

        eras = apply_order(project.eras, ordered_ids)
        await self._replace(project, ProjectCollection.ERAS, eras)

        logger.info(f"Reordered eras of project {project_id[:8]} ({len(ordered_ids)} ids)")
        return eras

    # --- Events ---

    async def create_event(
        self,
        project_id: str,
        era_id: str,
        data: TimelineEventCreate,
        principal_id: str,
    ) -> TimelineEvent:
        project = await self._load(project_id, principal_id)
        _require_era(project, era_id)

        siblings = [event for event in project.timeline if event.era_id == era_id]
        return await self._create_item(
            project, ProjectCollection.TIMELINE, TimelineEvent, data,
            era_id=era_id, order=next_order(siblings),
        )

    async def list_events(self, project_id: str, principal_id: str) -> list[TimelineEvent]:
        return await self._list_items(project_id, ProjectCollection.TIMELINE, principal_id)

    async def list_era_events(self, project_id: str, era_id: str, principal_id: str) -> list[TimelineEvent]:
        project = await self._load(project_id, principal_id)
        _require_era(project, era_id)
        return sort_by_order(event for event in project.timeline if event.era_id == era_id)

    async def update_event(
        self,
        project_id: str,
        event_id: str,
        data: TimelineEventUpdate,
        principal_id: str,
    ) -> TimelineEvent:
        return await self._update_item(
            project_id, ProjectCollection.TIMELINE, event_id, data, principal_id
        )

    async def delete_event(self, project_id: str, event_id: str, principal_id: str) -> None:
        await self._delete_item(project_id, ProjectCollection.TIMELINE, event_id, principal_id)

    async def reorder_events(
        self,
        project_id: str,
        era_id: str,
        ordered_ids: list[str],
        principal_id: str,
    ) -> list[TimelineEvent]:
        """Reposition the events of one era and return the whole sorted timeline."""
        project = await self._load(project_id, principal_id)
        _require_era(project, era_id)

        timeline = apply_order(
            project.timeline,
            ordered_ids,
            in_scope=lambda event: event.era_id == era_id,
        )
        await self._replace(project, ProjectCollection.TIMELINE, timeline)

        logger.info(f"Reordered events of era {era_id[:8]} in project {project_id[:8]}")
        return timeline
