# Router aggregator
from fastapi import APIRouter
from app.api.v1.endpoints import students_router


api_router = APIRouter()

api_router.include_router(students_router.router)
