import logging
import sys
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from .config import Settings
from .database import AppContext, create_context
from .api import auth, books, news, attendance, requests

logger = logging.getLogger(__name__)


def create_app(context: AppContext) -> FastAPI:
    """Build the API around an already-connected application context"""
    app = FastAPI(
        title=context.settings.app_name,
        description="Catalogo, noticias, asistencias y prestamos de la biblioteca",
        version="1.0.0",
        debug=context.settings.debug,
    )
    app.state.context = context

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    # Payloads that cannot be cast are a store failure, not a 422
    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        logger.error("Rejected payload for %s %s: %s", request.method, request.url.path, exc.errors())
        message = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        return JSONResponse(status_code=500, content={"error": message})

    @app.get("/", response_class=PlainTextResponse)
    def index():
        return "Servidor Biblioteca OK"

    @app.get("/health")
    def health():
        return {"ok": True}

    # Include routers
    app.include_router(auth.router)
    app.include_router(books.router)
    app.include_router(news.router)
    app.include_router(attendance.router)
    app.include_router(requests.router)

    return app


def main():
    settings = Settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not settings.database_url:
        logger.error("DATABASE_URL no definida")
        sys.exit(1)

    try:
        context = create_context(settings)
        context.check_connection()
        context.create_tables()
    except Exception as e:
        logger.error("Error al conectar a la base de datos: %s", e)
        sys.exit(1)

    logger.info("Conectado a la base de datos")
    uvicorn.run(
        create_app(context),
        host="0.0.0.0",
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
