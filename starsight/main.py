"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from starsight import __version__
from starsight.config import settings
from starsight.engine.registry import register_transforms

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.starsight_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="StarSight",
        description="Hand-drawn star detection and perfection scoring",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all transform modules to trigger registration
    register_transforms()

    from starsight.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
