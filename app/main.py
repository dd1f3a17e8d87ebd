import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1.class_schedules.router import router as class_schedules_router
from app.api.v1.schedule_slots.router import router as schedule_slots_router
from app.api.v1.teachers.router import router as teachers_router
from app.core.config import settings
from app.core.exceptions import ServiceError, error_body
from app.core.logging_config import configure_logging
from app.db.session import init_db
from app.storage.memory import MemoryStorage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    if settings.storage_backend == "memory":
        app.state.memory_storage = MemoryStorage()
    else:
        await init_db()
    logger.info("step=startup storage_backend=%s", settings.storage_backend)
    yield


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(error_body(exc)))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid data", "details": jsonable_encoder(exc.errors())},
    )


def create_app() -> FastAPI:
    app = FastAPI(title="Class Schedule Backend", lifespan=lifespan)

    # CORS: allow frontend to call this API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Routers
    app.include_router(teachers_router)
    app.include_router(schedule_slots_router)
    app.include_router(class_schedules_router)

    return app


app = create_app()
