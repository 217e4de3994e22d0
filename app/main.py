import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from scalar_fastapi import get_scalar_api_reference

from app.api.v1.router import v1_router
from app.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# OpenAPI tag metadata
# ---------------------------------------------------------------------------
TAG_METADATA = [
    {
        "name": "news",
        "description": "Biosimilar news dashboard - filtered items, SOP lanes "
        "(Monitor / Assess / Follow-up), metrics and filter options. Filters: search term, "
        "lane, strategic focus, source and recency window (7/14/30/60/90 days).",
    },
    {
        "name": "health",
        "description": "Service health and news snapshot availability.",
    },
]


def _validate_startup() -> dict[str, str]:
    """Validate the news snapshot at startup. Returns issues dict."""
    issues: dict[str, str] = {}

    data_file = settings.NEWS_DATA_FILE
    if data_file.exists():
        logger.info("Startup check: news snapshot found at %s", data_file)
    else:
        issues["news_snapshot"] = f"missing: {data_file}"
        logger.warning(
            "Startup check: news snapshot missing at %s (news endpoints will return 503)",
            data_file,
        )

    return issues


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("=" * 60)
    logger.info("  Biosimilar News Monitor starting")
    logger.info("=" * 60)

    startup_issues = _validate_startup()
    if startup_issues:
        logger.warning("Startup completed with issues: %s", list(startup_issues))
    else:
        logger.info("Application startup complete - all checks passed")

    yield

    logger.info("Application shutdown complete")


app = FastAPI(
    title="Biosimilar News Monitor API",
    summary="Biosimilar industry news mapped to SOP follow-up lanes",
    description=(
        "## Overview\n\n"
        "Aggregated statements and press releases from leading biosimilar sponsors, "
        "filtered for meaningful updates and mapped to SOP follow-up lanes.\n\n"
        "## SOP lanes\n\n"
        "- `Monitor` - keep an eye on it\n"
        "- `Assess` - evaluate impact\n"
        "- `Follow-up` - action required\n\n"
        "## Strategic focus\n\n"
        "Regulatory, Commercial, Clinical, Manufacturing, Partnerships, Corporate."
    ),
    version="0.1.0",
    openapi_tags=TAG_METADATA,
    lifespan=lifespan,
    # Keep Swagger UI and serve Scalar at /docs
    docs_url="/swagger",
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(v1_router)


@app.get("/", tags=["default"], summary="API entry", include_in_schema=False)
async def root():
    return {
        "message": "Biosimilar News Monitor API",
        "version": "0.1.0",
        "docs": "/docs",
        "swagger": "/swagger",
        "openapi": "/openapi.json",
    }


@app.get("/docs", include_in_schema=False)
async def scalar_html():
    return get_scalar_api_reference(
        openapi_url=app.openapi_url,
        title=app.title,
    )
