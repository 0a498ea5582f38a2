"""HTTP API for voxlist."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException

from voxlist import __version__
from voxlist.config import load_config
from voxlist.core import run_parse
from voxlist.models import (
    HealthResponse,
    ParseRequest,
    ParseResponse,
    StitchRequest,
    StitchResponse,
)
from voxlist.session.stitching import stitch_transcript


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="voxlist",
        version=__version__,
        description="Voice shopping-list command interpretation API.",
    )
    config = load_config()

    @app.get("/health", response_model=HealthResponse, tags=["system"])
    def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__, env=config.env)

    @app.post("/v1/parse", response_model=ParseResponse, tags=["interpretation"])
    def parse(request: ParseRequest) -> ParseResponse:
        try:
            return run_parse(request)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

    @app.post("/v1/stitch", response_model=StitchResponse, tags=["interpretation"])
    def stitch(request: StitchRequest) -> StitchResponse:
        return StitchResponse(text=stitch_transcript(request.chunks))

    return app


app = create_app()
