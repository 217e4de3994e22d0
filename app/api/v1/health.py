from fastapi import APIRouter

from app.config import settings

router = APIRouter()


@router.get(
    "/",
    summary="Health check",
    description="Service liveness plus whether the news snapshot is present.",
)
async def health_check():
    data_file = settings.NEWS_DATA_FILE
    return {
        "status": "ok",
        "news_snapshot": "present" if data_file.exists() else "missing",
    }
