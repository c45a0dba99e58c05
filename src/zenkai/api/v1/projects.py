"""Project endpoints.

Every route is scoped to the caller; projects owned by someone else are
reported as not found.
"""

from fastapi import APIRouter, status

from src.zenkai.api.dependencies import CallerId, ProjectServiceDep
from src.zenkai.schemas import ProjectCreate, ProjectRead

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=list[ProjectRead],
    summary="List projects",
    description="List the caller's projects, most recently updated first.",
)
async def list_projects(
    caller_id: CallerId,
    service: ProjectServiceDep,
) -> list[ProjectRead]:
    """List the caller's projects."""
    projects = await service.list_projects(caller_id)
    return [ProjectRead.model_validate(p) for p in projects]


@router.get(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Get project",
    responses={
        200: {"description": "Project details"},
        404: {"description": "Project not found"},
    },
)
async def get_project(
    project_id: str,
    caller_id: CallerId,
    service: ProjectServiceDep,
) -> ProjectRead:
    """Get one of the caller's projects."""
    project = await service.get_project(caller_id, project_id)
    return ProjectRead.model_validate(project)


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    description=(
        "Create a project from a first prompt. The code agent starts in the "
        "background; poll the project's messages for its reply."
    ),
    responses={
        201: {"description": "Project created and code agent started"},
        422: {"description": "Prompt is empty or too long"},
    },
)
async def create_project(
    request: ProjectCreate,
    caller_id: CallerId,
    service: ProjectServiceDep,
) -> ProjectRead:
    """Create a project and start the code agent."""
    project = await service.create_project(caller_id, request.value)
    return ProjectRead.model_validate(project)
