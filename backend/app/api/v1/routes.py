from fastapi import APIRouter

from app.api.v1.endpoints.main_question import router as main_question_router
from app.api.v1.endpoints.question import router as question_router
from app.api.v1.endpoints.upload import router as upload_router

routers = APIRouter()
routers.include_router(question_router)
routers.include_router(main_question_router)
routers.include_router(upload_router)
