import logging
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.middleware.cors import CORSMiddleware

from app.api.v1.routes import routers as v1_routers
from app.core.config import configs
from app.core.container import Container
from app.utils.class_object import singleton

load_dotenv()

logging.basicConfig(
    level=configs.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@singleton
class AppCreator:
    def __init__(self):
        # Init DI container
        self.container = Container()
        self.container.wire(modules=[__name__])

        # Init FastAPI
        self.app = FastAPI(
            title=configs.PROJECT_NAME,
            version="0.0.1",
            lifespan=self.lifespan,
        )

        # CORS
        if configs.BACKEND_CORS_ORIGINS:
            self.app.add_middleware(
                CORSMiddleware,
                allow_origins=[str(origin) for origin in configs.BACKEND_CORS_ORIGINS],
                allow_credentials=True,
                allow_methods=["*"],
                allow_headers=["*"],
            )

        self.app.add_exception_handler(HTTPException, http_exception_handler)
        self.app.add_exception_handler(RequestValidationError, validation_exception_handler)

        # Health check
        @self.app.get("/")
        async def root():
            return {"status": "service is working"}

        self.app.include_router(v1_routers)

    @asynccontextmanager
    async def lifespan(self, app: FastAPI):
        db = self.container.db()
        await db.create_database()
        file_storage = self.container.file_storage()
        logger.info("[STARTUP] database ready, uploads in %s", file_storage.upload_dir)
        yield
        await db.dispose()


async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("[REQUEST] invalid payload on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": "Invalid data"},
    )


app_creator = AppCreator()
app = app_creator.app
container = app_creator.container


if __name__ == "__main__":
    uvicorn.run(app, host=configs.HOST, port=configs.PORT)
