import uvicorn
from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware
from wedding_api.api.routes import admin as admin_router, auth as auth_router, health as health_router, rsvps as rsvps_router
from wedding_api.core.config import Settings, get_settings
from wedding_api.core.errors import register_exception_handlers
from wedding_api.core.logging import configure_logging, logger
from wedding_api.core.rate_limit import configure_limiter, limiter
from wedding_api.db import models  # noqa: F401  registers tables on Base.metadata
from wedding_api.db.session import Base, create_engine, create_session_factory
from wedding_api.middleware.request_logging import RequestLoggingMiddleware
from wedding_api.middleware.security_headers import SecurityHeadersMiddleware


def create_app(settings: Settings) -> FastAPI:
    """Build the app; every component reads configuration from ``settings``."""
    configure_logging(settings)
    configure_limiter(settings)

    app = FastAPI(title="Wedding API", description="RSVP and guest management for the wedding")

    engine = create_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.limiter = limiter
    register_exception_handlers(app)

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_router = APIRouter(prefix="/api")
    api_router.include_router(rsvps_router.router)
    api_router.include_router(admin_router.router)
    api_router.include_router(auth_router.router)
    api_router.include_router(health_router.router)
    app.include_router(api_router)

    @app.on_event("startup")
    async def on_startup():
        # No migrations: create missing tables directly
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(f"Wedding API ready, CORS origins: {settings.allowed_origins_list}")

    @app.on_event("shutdown")
    async def on_shutdown():
        await engine.dispose()

    return app


app = create_app(get_settings())


def run():
    settings = get_settings()
    uvicorn.run("wedding_api.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
