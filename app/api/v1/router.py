from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from app.api.v1.endpoints import students

api_router = APIRouter()


@api_router.get("/hello", response_class=PlainTextResponse, tags=["health"])
def hello():
    """
    Health check endpoint
    """
    return "hello world"


api_router.include_router(
    students.router,
    tags=["students"]
)
