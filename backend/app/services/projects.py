"""
Project management service.
"""

from app.database.store import ProjectStore
from app.errors import ConflictError
from app.logging import get_logger
from app.models import Principal, Project, ProjectCreate, ProjectData, ProjectUpdate, UserData
from app.services.guard import load_owned_project
from app.services.ids import IdGenerator

logger = get_logger('services.projects')

NAME_CONFLICT = "A project with this name already exists for your account."


class ProjectService:
    """Service for project CRUD scoped to the owning user."""

    def __init__(self, store: ProjectStore, ids: IdGenerator | None = None):
        self.store = store
        self.ids = ids or IdGenerator()

    async def create_project(self, data: ProjectCreate, owner_id: str) -> Project:
        existing = await self.store.find_one(name=data.name, owner_id=str(owner_id))
        if existing:
            raise ConflictError(NAME_CONFLICT)

        project = Project(id=self.ids.new_id(), name=data.name, owner_id=str(owner_id))
        project = await self.store.insert(project)

        logger.info(f"Created project: {project.name} ({project.id[:8]})")
        return project

    async def list_projects(self, owner_id: str) -> list[Project]:
        return await self.store.find(owner_id=str(owner_id))

    async def get_project(self, project_id: str, principal_id: str) -> Project:
        return await load_owned_project(self.store, project_id, principal_id)

    async def update_project(
        self,
        project_id: str,
        data: ProjectUpdate,
        principal_id: str,
    ) -> Project:
        project = await load_owned_project(self.store, project_id, principal_id)

        # Keeping the current name is never a conflict with itself
        if data.name != project.name:
            existing = await self.store.find_one(name=data.name, owner_id=project.owner_id)
            if existing:
                raise ConflictError(NAME_CONFLICT)
            logger.info(f"Renaming project {project.id[:8]}: {project.name} -> {data.name}")

        return await self.store.save(project.model_copy(update={"name": data.name}))

    async def delete_project(self, project_id: str, principal_id: str) -> None:
        project = await load_owned_project(self.store, project_id, principal_id)
        await self.store.delete_by_id(project.id)
        logger.info(f"Deleted project {project.id[:8]} and all embedded data")

    async def get_user_data(self, principal: Principal) -> UserData:
        """Assemble every project of the principal into the start-up payload."""
        projects = await self.list_projects(principal.id)
        return UserData(
            username=principal.username,
            projects={project.id: ProjectData.from_project(project) for project in projects},
        )
