"""FastAPI application: enrollment, secret issuance and login verification."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from otpgate import __version__
from otpgate.config import settings
from otpgate.directory import UserDirectory, load_users
from otpgate.server import routes


def create_app(directory: UserDirectory | None = None) -> FastAPI:
    """Build the app. Without `directory`, users are loaded from settings.users_file."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "directory", None) is None:
            app.state.directory = load_users(settings.users_file)
        yield

    app = FastAPI(
        title="otpgate",
        description="TOTP enrollment and verification",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.directory = directory

    app.include_router(routes.router)
    return app


app = create_app()
