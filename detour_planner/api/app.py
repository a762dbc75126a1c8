"""
FastAPI application factory.

* Registers routes for distance, detours and admin.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

import logging

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from detour_planner.api.middleware import limiter
from detour_planner.api.routes import admin, detours, distance
from detour_planner.config import settings

logging.basicConfig(level=settings.log_level)


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_title,
        description=(
            "Great-circle (haversine) distances and two-driver detour "
            "comparison: decides whether driver 1 or driver 2 should pick "
            "up and drop off the other."
        ),
        version="1.0.0",
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Routers
    app.include_router(distance.router, prefix="/api/v1")
    app.include_router(detours.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
