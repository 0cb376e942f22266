"""
Wellness Recommendation API — FastAPI app factory.

Use: uvicorn wellness_server.app:app
Or:  from wellness_server import app
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_config
from .routes import register_routes
from .services import InvalidTransitionError, RequestNotFoundError
from .state import get_state
from .utils import error_envelope

logger = logging.getLogger(__name__)


def _validation_details(exc: RequestValidationError) -> list:
    return [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", "")}
        for err in exc.errors()
    ]


def register_exception_handlers(app: FastAPI) -> None:
    """Every error leaves the API as {success: false, error, timestamp}."""

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content=error_envelope("Invalid request", _validation_details(exc)),
        )

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content=error_envelope(str(exc.detail)))

    @app.exception_handler(RequestNotFoundError)
    async def _not_found(request: Request, exc: RequestNotFoundError):
        return JSONResponse(status_code=404, content=error_envelope(str(exc)))

    @app.exception_handler(InvalidTransitionError)
    async def _invalid_transition(request: Request, exc: InvalidTransitionError):
        return JSONResponse(
            status_code=409,
            content=error_envelope(str(exc), {"status": exc.status.value, "target": exc.target.value}),
        )

    @app.exception_handler(Exception)
    async def _unexpected_error(request: Request, exc: Exception):
        logger.exception("[api] UNHANDLED_ERROR path=%s", request.url.path)
        return JSONResponse(status_code=500, content=error_envelope("Internal server error", str(exc)))


def create_app() -> FastAPI:
    """Build FastAPI app with CORS, error envelopes, routes, and startup."""
    config = get_config()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    app = FastAPI(
        title="Wellness Recommendation API",
        description="Situation classification, activity recommendations and HR review queue",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    register_routes(app)

    @app.on_event("startup")
    async def _startup_logging():
        ok, errors = config.validate()
        for err in errors:
            print(f"[startup] WARNING: {err}")
        state = get_state()
        print("Wellness Recommendation API starting...")
        print(f"[startup] Data source: {state.config.data_source} (config valid={ok})")
        print(
            f"[startup] Engine: top_n={state.engine_config.top_n}, "
            f"persist={state.engine_config.persist_recommendations}, seed={state.engine_config.random_seed}"
        )

    return app


app = create_app()
