"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from clipgrad.config import APP_VERSION, settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.clipgrad_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="ClipGrad",
        description="Color gradients along vector clip edges: polygon offset and band generation",
        version=APP_VERSION,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from clipgrad.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
