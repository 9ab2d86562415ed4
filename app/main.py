from typing import Optional

import uvicorn
from fastapi import FastAPI

from app.api.v1.api import api_router
from app.core.config import Settings, get_settings
from app.core.error_handlers import register_exception_handlers
from app.db.database import seed_sample_data
from app.db.memory_store import StudentStore
from app.schemas.student_schemas import MessageResponse
from app.utils.logger import logger, setup_logging


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.app_name)

    # one store per process; routes reach it through app.state
    store = StudentStore()
    if settings.seed_sample_data:
        seed_sample_data(store)
    app.state.store = store
    app.state.settings = settings

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/", response_model=MessageResponse)
    def read_root():
        return MessageResponse(success=True, message=f"Welcome to the {settings.app_name}!")

    logger.info("%s ready with %d students", settings.app_name, store.count())
    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
