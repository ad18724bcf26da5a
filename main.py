# main.py

from contextlib import asynccontextmanager
import datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import settings
from config.database import Base, engine
from routers import exercises_router, users_router
from utils.errors import InternalError, ServiceError, ValidationError
from utils.logging_utils import setup_logger

import models  # noqa: F401  registra las tablas en Base.metadata

logger = setup_logger("exercisedb")

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def _validation_message(exc: RequestValidationError) -> str:
    """Primer error de validación como 'campo: motivo'"""
    errors = exc.errors()
    if not errors:
        return "Datos de entrada inválidos"
    first = errors[0]
    loc = [str(p) for p in first.get("loc", ()) if p not in ("body", "query")]
    msg = first.get("msg", "valor inválido")
    return f"{'.'.join(loc)}: {msg}" if loc else msg


# ============================================================
# MANEJO DE ERRORES
# ============================================================

async def service_error_handler(request: Request, exc: ServiceError):
    return _error(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return await service_error_handler(request, ValidationError(_validation_message(exc)))


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail if isinstance(exc.detail, str) else INTERNAL_ERROR_MESSAGE
    return _error(exc.status_code, detail)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Error no controlado en %s %s", request.method, request.url.path)
    return await service_error_handler(request, InternalError(INTERNAL_ERROR_MESSAGE))


# ============================================================
# APP
# ============================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info("Tablas listas: %s", ", ".join(sorted(Base.metadata.tables)))
    yield


def create_app() -> FastAPI:
    """Construye la app y su tabla de rutas una sola vez"""
    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        description="API de ejercicios y usuarios con autenticación por código OTP",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials="*" not in settings.CORS_ORIGINS,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(exercises_router)
    app.include_router(users_router)

    @app.get("/", include_in_schema=False)
    def read_root():
        """Ruta raíz de la API"""
        return {
            "nombre": settings.API_TITLE,
            "version": settings.API_VERSION,
            "documentacion": "/docs",
            "redoc": "/redoc",
        }

    @app.get("/health", include_in_schema=False)
    def health_check():
        return {"status": "ok", "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat()}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info("Documentación disponible en: http://127.0.0.1:8000/docs")
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
