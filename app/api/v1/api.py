from fastapi import APIRouter
from app.api.v1.endpoints import users, assessments
from app.api.v1.endpoints import questions
from app.api.v1.endpoints import responses
from app.api.v1.endpoints import uploads
from app.api.v1.endpoints import admin

api_router = APIRouter()
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(assessments.router, prefix="/assessments", tags=["assessments"])
api_router.include_router(questions.router, tags=["questions"])
api_router.include_router(responses.router, prefix="/responses", tags=["responses"])
api_router.include_router(uploads.router, prefix="/upload", tags=["uploads"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
