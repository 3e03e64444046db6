"""HTTP surface: survey list/append/clear, CSV download, taxonomy and wheel layout."""

import json
import logging
from collections.abc import Callable
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Literal
from uuid import uuid4
from zoneinfo import ZoneInfo

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool

from application.constants import (
    DELETE_ERROR_MESSAGE,
    DELETE_OK_MESSAGE,
    EXPORT_MEDIA_TYPE,
    FETCH_ERROR_PREFIX,
    SAVE_ERROR_PREFIX,
    SAVE_OK_MESSAGE,
)
from application.export import export_filename, submissions_to_csv
from application.submissions import SubmissionLog
from domain.errors import InvalidInputError, SurveyError
from domain.taxonomy import FlavorTaxonomy
from domain.wheel import compute_wheel_layout, wheel_radius
from infrastructure.config.models import AppConfig
from infrastructure.constants import MAX_SUBMISSIONS
from infrastructure.observability import clear_request_context, get_log_context, set_log_context

logger = logging.getLogger(__name__)


def _fail(error: str, status_code: int, **extra: object) -> JSONResponse:
    return JSONResponse({"success": False, "error": error, **extra}, status_code=status_code)


def create_app(
    cfg: AppConfig,
    *,
    log: SubmissionLog,
    taxonomy: FlavorTaxonomy,
    on_shutdown: Callable[[], None] | None = None,
) -> FastAPI:
    """Build the FastAPI app around an injected submission log and a loaded taxonomy."""

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        yield
        if on_shutdown is not None:
            on_shutdown()

    app = FastAPI(title="Coffee Flavor Wheel Survey", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.submission_log = log
    app.state.taxonomy = taxonomy

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        request_id = uuid4().hex
        set_log_context(request_id_full=request_id, route=f"{request.method} {request.url.path}")
        try:
            response = await call_next(request)
        finally:
            clear_request_context()
        response.headers["X-Request-Id"] = request_id
        return response

    @app.get("/surveys")
    def list_surveys(limit: int | None = Query(default=None, ge=1, le=MAX_SUBMISSIONS)):
        try:
            records = log.list_recent(limit)
        except SurveyError as e:
            logger.exception("Survey fetch error (store=%s)", get_log_context()["store_backend"])
            return _fail(f"{FETCH_ERROR_PREFIX}: {e}", 500)
        return {"success": True, "data": [r.to_payload() for r in records], "count": len(records)}

    @app.post("/surveys")
    async def create_survey(request: Request):
        raw = await request.body()
        try:
            payload = json.loads(raw or b"null")
        except ValueError:
            logger.warning("Rejected survey: body is not valid JSON")
            return _fail("Request body must be valid JSON", 400, field="body")

        try:
            record = await run_in_threadpool(log.append, payload)
        except InvalidInputError as e:
            logger.warning("Rejected survey: %s (field=%s)", e.message, e.field)
            return _fail(e.message, 400, field=e.field)
        except SurveyError as e:
            logger.exception("Survey save error (store=%s)", get_log_context()["store_backend"])
            return _fail(f"{SAVE_ERROR_PREFIX}: {e}", 500)
        return {"success": True, "data": record.to_payload(), "message": SAVE_OK_MESSAGE}

    @app.delete("/surveys")
    def delete_surveys():
        try:
            log.clear_all()
        except SurveyError:
            logger.exception("Survey delete error (store=%s)", get_log_context()["store_backend"])
            return _fail(DELETE_ERROR_MESSAGE, 500)
        return {"success": True, "message": DELETE_OK_MESSAGE}

    @app.get("/surveys/export")
    def export_surveys():
        try:
            records = log.list_recent(log.max_entries)
        except SurveyError as e:
            logger.exception("Survey export error (store=%s)", get_log_context()["store_backend"])
            return _fail(f"{FETCH_ERROR_PREFIX}: {e}", 500)
        filename = export_filename(datetime.now(ZoneInfo(cfg.timezone)).date())
        return Response(
            content=submissions_to_csv(records),
            media_type=EXPORT_MEDIA_TYPE,
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    @app.get("/taxonomy")
    def get_taxonomy(shape: Literal["categories", "hierarchy"] = "categories"):
        data = taxonomy.to_hierarchy() if shape == "hierarchy" else taxonomy.categories
        return {"success": True, "data": data, "source": taxonomy.source}

    @app.get("/wheel")
    def get_wheel(
        radius: float | None = Query(default=None, gt=0),
        width: float | None = Query(default=None, gt=0),
        height: float = Query(default=800, gt=0),
        screen: float = Query(default=1280, gt=0),
    ):
        r = radius if radius is not None else wheel_radius(width, height, screen)
        arcs = compute_wheel_layout(taxonomy, r)
        return {"success": True, "radius": r, "data": [a.to_payload() for a in arcs]}

    return app
