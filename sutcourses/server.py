"""HTTP API serving course searches."""

from __future__ import annotations

import logging

import httpx
import uvicorn
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import Route

from .config import AppConfig
from .models import CourseSearch, to_json_dict
from .scraper import CourseUrlScraper
from .use_cases import SearchCoursesUseCase

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Oops! Looks like you took a wrong turn... 404"
HEALTHY_MESSAGE = "All systems go! Everything is running smooth like butter 🧈"


async def health_check(request: Request) -> Response:
    """Report that the service is up."""
    return PlainTextResponse(HEALTHY_MESSAGE, status_code=200)


async def not_found(request: Request, exc: Exception) -> Response:
    """Answer requests for unknown paths."""
    return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=404)


def create_app(use_case: SearchCoursesUseCase) -> Starlette:
    """Build the web application around a course search use case."""

    async def search_courses(request: Request) -> Response:
        try:
            search = CourseSearch.from_query(request.query_params)
        except ValueError as exc:
            return PlainTextResponse(
                f"Failed to deserialize query string: {exc}", status_code=400
            )
        try:
            courses = await use_case.search_courses(search)
        except Exception as exc:
            logger.error("Course search failed: %s", exc)
            return PlainTextResponse(str(exc), status_code=500)
        return JSONResponse(to_json_dict(courses))

    return Starlette(
        routes=[
            Route("/courses", search_courses, methods=["GET"]),
            Route("/health", health_check, methods=["GET"]),
        ],
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=["*"],
                allow_methods=["GET", "POST"],
            )
        ],
        exception_handlers={404: not_found},
    )


async def serve(config: AppConfig) -> None:
    """Serve the API on all interfaces until interrupted."""
    async with httpx.AsyncClient(follow_redirects=True) as client:
        scraper = CourseUrlScraper(config.server.course_reg_url, client)
        app = create_app(SearchCoursesUseCase(scraper))
        server = uvicorn.Server(
            uvicorn.Config(app, host="0.0.0.0", port=config.server.port)
        )
        logger.info("Server running on port %d", config.server.port)
        await server.serve()