"""Domain errors and exception handlers with request_id in responses."""

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.zenkai.core.logging import get_logger

logger = get_logger(__name__)

PROJECT_NOT_FOUND_DETAIL = "Project not found."


class ProjectNotFoundError(LookupError):
    """Project does not exist or is not owned by the caller.

    Both cases produce the same response.
    """

    def __init__(self, project_id: object) -> None:
        super().__init__(f"Project {project_id} not found or access denied")
        self.project_id = project_id


class ExternalServiceError(RuntimeError):
    """The sandbox or agent provider failed.

    Raised inside Temporal activities; the activity retry policy decides
    whether the step is attempted again.
    """

    def __init__(self, service: str, message: str) -> None:
        super().__init__(f"{service}: {message}")
        self.service = service


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
        )

    @app.exception_handler(ProjectNotFoundError)
    async def project_not_found_handler(
        request: Request, exc: ProjectNotFoundError
    ) -> JSONResponse:
        logger.info("Project lookup denied", project_id=str(exc.project_id))
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "detail": PROJECT_NOT_FOUND_DETAIL,
                "request_id": correlation_id.get(),
            },
        )

    @app.exception_handler(SQLAlchemyError)
    async def persistence_exception_handler(
        request: Request, exc: SQLAlchemyError
    ) -> JSONResponse:
        request_id = correlation_id.get()
        logger.exception(
            "Persistence error",
            exc_info=exc,
            request_id=request_id,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "Internal server error",
                "request_id": request_id,
            },
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = correlation_id.get()
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=request_id,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "Internal server error",
                "request_id": request_id,
            },
        )
