# pizzeria/main.py
import datetime as dt
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Your configuration and DB
from pizzeria.config import Settings, settings as default_settings
from pizzeria.core.db import build_tortoise_config, init_db, close_db
from pizzeria.core.errors import register_exception_handlers
from pizzeria.core.security import TokenService

from pizzeria.api.v1.routers import auth
from pizzeria.api.v1.routers.inventory import build_inventory_routers

logger = logging.getLogger("uvicorn.error")

def create_app(settings: Settings | None = None, token_service: TokenService | None = None) -> FastAPI:
    """
    Build the API.

    With settings.auth_enabled the app serves /registro and /login and guards
    settings.protected_resources with Bearer tokens; without it, it is the
    plain CRUD backend.

    Args:
        settings: Configuration (defaults to the environment-derived settings)
        token_service: Token issuer/verifier override; built from
            settings.jwt_secret when omitted
    """
    settings = settings or default_settings
    app = FastAPI(title=settings.APP_NAME)
    app.state.settings = settings
    app.state.tokens = token_service or TokenService(
        settings.jwt_secret,
        ttl=dt.timedelta(minutes=settings.access_token_expire_minutes),
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.on_event("startup")
    async def on_startup():
        if settings.auth_enabled and token_service is None and settings.uses_insecure_secret:
            logger.warning("[startup] JWT_SECRET not set -> using the insecure fallback secret (testing only)")
        await init_db(build_tortoise_config(settings.database_url), settings.generate_schemas)
        logger.info("[startup] %s ready (auth %s)", settings.APP_NAME,
                    "enabled" if settings.auth_enabled else "disabled")

    @app.on_event("shutdown")
    async def on_shutdown():
        await close_db()

    # REST
    protected: set[str] = set()
    if settings.auth_enabled:
        app.include_router(auth.router)
        protected = set(settings.protected_resources)
    for router in build_inventory_routers(protected):
        app.include_router(router)

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    return app

app = create_app()

def run() -> None:
    """Console entry point: serve the default app with uvicorn."""
    import uvicorn
    uvicorn.run("pizzeria.main:app", host=default_settings.host, port=default_settings.port)
