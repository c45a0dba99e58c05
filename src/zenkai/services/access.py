"""Ownership checks shared by every project-scoped procedure."""

from uuid import UUID

from src.zenkai.core.exceptions import ProjectNotFoundError
from src.zenkai.models import Project
from src.zenkai.repositories import ProjectRepository


def parse_project_id(project_id: UUID | str) -> UUID:
    """Coerce a caller-supplied project id.

    A malformed id can never name a project, so it is reported as not found.
    """
    if isinstance(project_id, UUID):
        return project_id
    try:
        return UUID(project_id)
    except ValueError as e:
        raise ProjectNotFoundError(project_id) from e


async def assert_owned(
    project_repo: ProjectRepository, project_id: UUID | str, caller_id: str
) -> Project:
    """Return the project if the caller owns it.

    Raises:
        ProjectNotFoundError: If the id is malformed, the project does not
            exist, or it has another owner.
    """
    project = await project_repo.get_owned(parse_project_id(project_id), caller_id)
    if project is None:
        raise ProjectNotFoundError(project_id)
    return project
