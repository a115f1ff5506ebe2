"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Load .env from the project root or backend/
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from drywall.data.sheet_sizes import SHEET_CATALOG
from drywall.engine import ENGINE_VERSION, DrywallEngine
from drywall.exceptions import DrywallError, ZeroAreaError
from drywall.models.specs import ProjectOptions, RoomSpec  # noqa: TCH001

logger = logging.getLogger(__name__)


class ProjectRequest(BaseModel):
    """Body for POST /api/project."""

    room: RoomSpec
    options: ProjectOptions = Field(default_factory=ProjectOptions)


def _http_error(exc: DrywallError) -> HTTPException:
    if isinstance(exc, ZeroAreaError):
        return HTTPException(status_code=400, detail=str(exc))
    return HTTPException(status_code=422, detail=str(exc))


def create_app(*, engine: DrywallEngine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built engine for dependency injection (e.g. tests).
        If not provided, one is created from environment variables here,
        so a bad DRYWALL_DEFAULT_AREA_SQFT fails at startup.
    """
    from drywall.api.deps import cors_origins, create_engine

    if engine is None:
        engine = create_engine()

    app = FastAPI(title="Drywall Estimator", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject their own engine
    app.state.engine = engine

    def _get_engine() -> DrywallEngine:
        eng: DrywallEngine = app.state.engine
        return eng

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # GET /api/sheet-sizes
    # ------------------------------------------------------------------

    @app.get("/api/sheet-sizes")
    def sheet_sizes() -> dict[str, Any]:
        return {
            size.value: entry.model_dump(mode="json")
            for size, entry in SHEET_CATALOG.items()
        }

    # ------------------------------------------------------------------
    # POST /api/sheets
    # ------------------------------------------------------------------

    @app.post("/api/sheets")
    def estimate_sheets(room: RoomSpec) -> dict[str, Any]:
        from drywall.estimators import sheets

        return sheets.estimate(room).model_dump(mode="json")

    # ------------------------------------------------------------------
    # POST /api/cost, /api/mud, /api/screws, /api/tape
    #
    # Bodies are raw option dicts; area_sqft is optional and falls back
    # to the engine's default area.
    # ------------------------------------------------------------------

    def _run(name: str, payload: dict[str, Any] | None) -> dict[str, Any]:
        values = dict(payload or {})
        area = values.pop("area_sqft", None)
        values.pop("carried", None)  # engine-only argument
        eng = _get_engine()
        estimator = getattr(eng, name)
        try:
            result = estimator(area, **values)
        except DrywallError as exc:
            logger.warning("Rejected %s estimate: %s", name, exc)
            raise _http_error(exc) from exc
        return result.model_dump(mode="json")

    @app.post("/api/cost")
    def estimate_cost(payload: dict[str, Any] | None = Body(default=None)) -> dict[str, Any]:
        return _run("cost", payload)

    @app.post("/api/mud")
    def estimate_mud(payload: dict[str, Any] | None = Body(default=None)) -> dict[str, Any]:
        return _run("mud", payload)

    @app.post("/api/screws")
    def estimate_screws(payload: dict[str, Any] | None = Body(default=None)) -> dict[str, Any]:
        return _run("screws", payload)

    @app.post("/api/tape")
    def estimate_tape(payload: dict[str, Any] | None = Body(default=None)) -> dict[str, Any]:
        return _run("tape", payload)

    # ------------------------------------------------------------------
    # POST /api/project
    # ------------------------------------------------------------------

    @app.post("/api/project")
    def estimate_project(request: ProjectRequest) -> dict[str, Any]:
        eng = _get_engine()
        try:
            result = eng.estimate_project(request.room, request.options)
        except DrywallError as exc:
            logger.warning("Rejected project estimate: %s", exc)
            raise _http_error(exc) from exc
        return {
            "estimate": result.model_dump(mode="json"),
            "summary_dict": result.to_summary_dict(),
        }

    return app
