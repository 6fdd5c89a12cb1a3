from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from incidentdesk.core.chat.router import router as chat_router
from incidentdesk.core.dashboard.router import router as dashboard_router
from incidentdesk.core.incidents.router import router as incidents_router
from incidentdesk.core.logs.router import router as logs_router
from incidentdesk.core.tools.router import router as tools_router
from incidentdesk.errors import register_exception_handlers
from incidentdesk.logging import setup_logging
from incidentdesk.middleware import RequestLogMiddleware
from incidentdesk.schemas import ErrorResponse
from incidentdesk.settings import get_settings

settings = get_settings()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def create_app() -> FastAPI:
    setup_logging(
        level="DEBUG" if settings.APP_DEBUG else settings.LOG_LEVEL,
        json_logs=settings.LOG_JSON or not settings.APP_DEBUG,
    )

    app = FastAPI(
        title="Incident Desk API",
        version="0.1.0",
        docs_url="/docs" if settings.APP_DEBUG else None,
        redoc_url="/redoc" if settings.APP_DEBUG else None,
    )

    app.add_middleware(RequestLogMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.APP_DEBUG else settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    for router in (incidents_router, dashboard_router, tools_router, logs_router, chat_router):
        app.include_router(router, prefix=settings.API_PREFIX, responses=ERROR_RESPONSES)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
