"""
Auth service — application entry point.
"""

from __future__ import annotations

import logging
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware import register_error_handlers, register_middleware
from auth.jwt import TokenSigner
from auth.password import PasswordHasher
from auth.routes import router as auth_router
from config.settings import Settings, config
from database.session import create_tables

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("sqlalchemy.engine", "asyncio"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def create_app(settings: Settings = config) -> FastAPI:
    app = FastAPI(
        title="Auth Service",
        version="1.0.0",
        description="User signup and login with cookie sessions.",
    )

    # Process-wide collaborators, built once and shared by every request.
    app.state.password_hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
    app.state.token_signer = TokenSigner(settings.jwt_secret, settings.jwt_expiry_seconds)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app)
    register_error_handlers(app)

    # Routes
    app.include_router(auth_router, prefix="/api/v1/auth")

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.on_event("startup")
    async def on_startup():
        if settings.auto_create_tables:
            await create_tables()
        logger.info("Application ready to accept requests.")

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
