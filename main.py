from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from core.config import Settings, settings as default_settings
from core.database import init_firestore_store
from core.errors import MessagingError
from core.log import get_logger, install_excepthook, setup_logging
from core.store import DocumentStore
from routers import message_router, project_router


logger = get_logger(__name__)

AVAILABLE_ENDPOINTS = [
    "/health",
    "/projects/:projectId/messages",
    "/projects/:projectId/messages/:messageId",
    "/projects/:projectId/participants",
    "/projects/:projectId/init",
]


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    if field:
        return f"Invalid request: {field}: {first.get('msg')}"
    return f"Invalid request: {first.get('msg')}"


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(MessagingError)
    async def messaging_error(request: Request, exc: MessagingError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _validation_message(exc)})

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        # unmatched path, or a known path with a verb it does not serve
        if exc.status_code in (404, 405):
            return JSONResponse(
                status_code=404,
                content={
                    "error": "Endpoint not found",
                    "method": request.method,
                    "url": str(request.url.path) + (f"?{request.url.query}" if request.url.query else ""),
                    "availableEndpoints": AVAILABLE_ENDPOINTS,
                },
            )
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": f"Server error: {exc}"})


def create_app(store: DocumentStore | None = None, settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.store is None:
            app.state.store = init_firestore_store(settings)
        logger.info("Messaging API started, environment: %s", settings.ENVIRONMENT)
        yield

    app = FastAPI(title="Messaging API", lifespan=lifespan)
    app.state.store = store
    app.state.settings = settings

    # Respect X-Forwarded-Proto/Host when behind a proxy (Docker/nginx/etc.)
    app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if not settings.is_production:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            logger.info("%s %s", request.method, request.url.path)
            return await call_next(request)

    _register_error_handlers(app)

    app.include_router(project_router.router)
    app.include_router(message_router.router)

    @app.get("/")
    def root():
        return {"message": "Messaging API Ready"}

    @app.get("/health")
    def health():
        logger.info("Health check requested")
        return {
            "status": "OK",
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "firebase": "Connected" if app.state.store is not None else "Not Connected",
            "environment": settings.ENVIRONMENT,
        }

    return app


install_excepthook()
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)
