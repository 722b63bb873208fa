"""FastAPI application entry point for the portfolio site API."""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portfolio_site.api.errors import register_exception_handlers
from portfolio_site.api.middleware import DashboardGateMiddleware
from portfolio_site.api.routes import (
    achievements,
    auth,
    contact,
    dashboard,
    health,
    profile,
    projects,
)
from portfolio_site.config import get_cors_origins

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize resources on startup and clean up on shutdown."""
    from portfolio_site.data.db import dispose_engine, init_db

    init_db()
    yield
    dispose_engine()


app = FastAPI(
    title="Portfolio Site API",
    description="Content API and admin gate for a personal portfolio website",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(DashboardGateMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(health.router)
app.include_router(dashboard.router)
app.include_router(profile.router, prefix="/api")
app.include_router(projects.router, prefix="/api")
app.include_router(achievements.router, prefix="/api")
app.include_router(contact.router, prefix="/api")
app.include_router(auth.router, prefix="/api")


def main(host: str | None = None, port: int | None = None, reload: bool = False) -> None:
    """Start the development server."""
    import uvicorn

    uvicorn.run(
        "portfolio_site.api.main:app",
        host=host or os.getenv("HOST", "0.0.0.0"),
        port=port or int(os.getenv("PORT", "8000")),
        reload=reload,
    )


if __name__ == "__main__":
    main()
