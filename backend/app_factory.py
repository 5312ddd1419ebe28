"""Application factory and context for the Cosmic Hatchery API.

This module provides a factory for creating the FastAPI app without
import-time side effects. The generator, its tables and the stats recorder
all live on an ``AppContext`` so each test can build a fresh one.

Usage:
------
    # For production (uses default settings from environment)
    app = create_app()

    # For testing (custom configuration)
    context = AppContext(generator=CreatureGeneticsGenerator(rng_factory=lambda: random.Random(1)))
    app = create_app(context=context, production_mode=False)
"""

import logging
import os
import time
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.hatch_stats import HatchStatsRecorder
from backend.logging_config import configure_logging
from hatchery.config.server import DEFAULT_API_PORT
from hatchery.genetics.generator import CreatureGeneticsGenerator


@dataclass
class AppContext:
    """Runtime context holding all application state."""

    # Core services
    stats: HatchStatsRecorder = field(default_factory=HatchStatsRecorder)
    generator: Optional[CreatureGeneticsGenerator] = None

    # Configuration
    server_version: str = "1.0.0"
    api_port: int = field(
        default_factory=lambda: int(os.getenv("HATCHERY_API_PORT", str(DEFAULT_API_PORT)))
    )
    production_mode: bool = field(
        default_factory=lambda: os.getenv("PRODUCTION", "false").lower() == "true"
    )
    allowed_origins: List[str] = field(
        default_factory=lambda: os.getenv("ALLOWED_ORIGINS", "*").split(",")
    )

    # Timing
    server_start_time: float = field(default_factory=time.time)

    # Logging
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("hatchery.backend"))

    def __post_init__(self) -> None:
        if self.generator is None:
            self.generator = CreatureGeneticsGenerator(observer=self.stats)
        elif self.generator.observer is None:
            self.generator.observer = self.stats

    @property
    def uptime_seconds(self) -> float:
        return time.time() - self.server_start_time


def create_app(
    *,
    production_mode: Optional[bool] = None,
    context: Optional[AppContext] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        production_mode: Override production mode (default: from PRODUCTION env var)
        context: Pre-configured AppContext (for testing). If None, creates a new one.

    Returns:
        Configured FastAPI application with context attached as app.state.context
    """
    logger = configure_logging(extra_loggers=("backend",))

    if context is None:
        context = AppContext()
    if production_mode is not None:
        context.production_mode = production_mode
    context.logger = logger

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup and shutdown."""
        ctx = app.state.context
        ctx.logger.info(
            "LIFESPAN: Hatchery API %s ready (genetics %s)",
            ctx.server_version,
            ctx.generator.config.version,
        )
        yield
        ctx.logger.info(
            "LIFESPAN: Shutting down after %d hatches (%.0fs uptime)",
            ctx.stats.total,
            ctx.uptime_seconds,
        )

    app = FastAPI(
        title="Cosmic Hatchery API",
        lifespan=lifespan,
        docs_url=None if context.production_mode else "/docs",
        redoc_url=None if context.production_mode else "/redoc",
    )

    # Attach context to app state for access in routes
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=context.allowed_origins if context.production_mode else ["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    _setup_routers(app, context)
    return app


def _setup_routers(app: FastAPI, ctx: AppContext) -> None:
    """Setup and include all API routers."""
    from backend.routers import genetics

    app.include_router(genetics.setup_router(ctx))
    ctx.logger.info("API routers configured successfully")
