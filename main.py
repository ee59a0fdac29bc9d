from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from contextlib import asynccontextmanager
from sqlalchemy import text
import uvicorn
import logging

from config import settings, configure_logging

from routes import pets_router, auth_router
from models.common import HealthCheckResponse
from models.errors import ERRORS_HEADER, BindingErrorsResponse
from database.db import create_tables, engine, get_database_url

logger = logging.getLogger(__name__)

# Configurar logging una sola vez al inicio
configure_logging()

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Maneja el ciclo de vida de la aplicación."""
    # Startup
    logger.info(f"Base de datos: {get_database_url()}")
    try:
        create_tables()
    except Exception as e:
        logger.warning(f"No se pudieron crear tablas en la base de datos: {e}")
    yield
    # Shutdown

app = FastAPI(
    title=settings.app_name,
    description="Pet management REST API of the veterinary clinic.",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    debug=settings.debug_mode
)

# Los errores viajan en la cabecera `errors`; el navegador solo la ve si se expone
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[ERRORS_HEADER, "content-type"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Structural validation failures: 400 with the field errors in the `errors` header."""
    errors = BindingErrorsResponse()
    errors.add_all_errors(exc.errors())
    logger.info(f"Validación fallida en {request.method} {request.url.path}: {len(errors.binding_errors)} errores")
    return Response(
        status_code=status.HTTP_400_BAD_REQUEST,
        headers={ERRORS_HEADER: errors.to_json()},
    )


@app.get("/")
async def root():
    """Endpoint raíz con información de la API."""
    return {
        "message": settings.app_name,
        "version": settings.app_version,
        "status": "active",
        "environment": "production" if settings.is_production else "development",
        "docs": "/docs",
        "redoc": "/redoc"
    }

app.include_router(pets_router)
app.include_router(auth_router)

@app.get("/health", response_model=HealthCheckResponse)
async def health_check():
    """Health check endpoint con verificación de base de datos."""
    db_status = "unknown"
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception as e:
        logger.error(f"Health check: Error de conexión a BD: {e}")
        db_status = "disconnected"

    return HealthCheckResponse(
        status="healthy" if db_status == "connected" else "unhealthy",
        service=settings.app_name,
        version=settings.app_version,
        database=db_status,
        environment="production" if settings.is_production else "development",
    )

if __name__ == "__main__":
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        log_level="info"
    )
