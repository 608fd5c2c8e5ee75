"""
Ownership guard shared by every project operation.
"""

from app.database.store import ProjectStore
from app.errors import ForbiddenError, NotFoundError
from app.logging import get_logger
from app.models import Project

logger = get_logger('services.guard')


async def load_owned_project(store: ProjectStore, project_id: str, principal_id) -> Project:
    """
    Load a project and verify that ``principal_id`` owns it.

    Both ids are compared in their string form so that differently typed
    identifiers for the same user still match.

    :param store: Project document store
    :type store: ProjectStore
    :param project_id: Id of the project to load
    :type project_id: str
    :param principal_id: Id of the calling user
    :return: The freshly loaded project
    :rtype: Project
    :raises NotFoundError: No project has this id
    :raises ForbiddenError: The caller is not the owner
    """
    project = await store.find_by_id(project_id)
    if project is None:
        raise NotFoundError(f'Project with ID "{project_id}" not found.')

    if str(project.owner_id) != str(principal_id):
        logger.warning(f"Principal {principal_id} denied access to project {project_id[:8]}")
        raise ForbiddenError("You do not have permission to access this project.")

    return project
