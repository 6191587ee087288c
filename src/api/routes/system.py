from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["System"])


@router.get("/ping", response_class=PlainTextResponse)
async def ping():
    return "pong"
