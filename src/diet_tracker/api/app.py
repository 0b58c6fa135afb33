"""FastAPI application factory."""

import logging

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse

from diet_tracker.api.auth import require_user
from diet_tracker.api.me import router as me_router
from diet_tracker.api.serializers import serialize_food
from diet_tracker.app_logging import configure_logging
from diet_tracker.containers import AppContainer
from diet_tracker.domain.errors import NotFoundError, NutritionError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(me_router)

    @app.exception_handler(NutritionError)
    async def nutrition_error_handler(
        request: Request, exc: NutritionError
    ) -> JSONResponse:
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "field": exc.field},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/foods", dependencies=[Depends(require_user)])
    async def list_foods(request: Request) -> dict[str, object]:
        """Return the food catalogue ordered by name."""
        state_container: AppContainer = request.app.state.container
        foods = state_container.food_service.list_foods()
        return {"foods": [serialize_food(food) for food in foods]}

    return app
