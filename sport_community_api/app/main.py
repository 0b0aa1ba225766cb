"""
Main entrypoint for the Sport Community API.

This module assembles the FastAPI application.  ``create_app`` takes
an optional ``Settings`` instance (tests pass one pointing at a
temporary database and upload directory) and wires things up in a
fixed order:

1. settings are resolved and stored on ``app.state.settings``;
2. logging is configured;
3. a ``Database`` is built and stored on ``app.state.db``;
4. at startup, migrations run and the upload directory is created;
5. routes, the ``/uploads`` static mount and error handlers are added.

The module-level ``app`` lets uvicorn discover the application::

    uvicorn sport_community_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .api.v1.router import router as v1_router
from .core.config import Settings
from .core.db import Database, resolve_path
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.uploads import PUBLIC_PREFIX

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to ``Settings()`` read from the
        environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or Settings()
    settings.upload_dir = resolve_path(settings.upload_dir)

    setup_logging(settings)

    db = Database(settings.database_url, atomic_writes=settings.atomic_writes)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db.init_db()
        Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
        logger.info("Database ready at %s, uploads in %s", db.path, settings.upload_dir)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = db

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(v1_router, prefix=settings.api_prefix)

    # Uploaded files are public; check_dir is off because the directory
    # is created at startup.
    app.mount(PUBLIC_PREFIX, StaticFiles(directory=settings.upload_dir, check_dir=False), name="uploads")

    register_exception_handlers(app)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
