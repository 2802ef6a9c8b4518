import logging
from importlib.metadata import version as pkg_version

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bingoboard.api import cards_router, game_router, health_router, scan_router
from bingoboard.config import settings
from bingoboard.models.failure import KnownError

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    version=pkg_version("bingoboard"),
)


@app.exception_handler(KnownError)
async def known_error_handler(_request: Request, exc: KnownError) -> JSONResponse:
    """Render known failures as {"failure": FailureDetail}."""
    logger.info("Request failed: %s (%s)", exc.message, exc.kind.value)
    return JSONResponse(
        status_code=exc.status_code,
        content={"failure": exc.to_detail().model_dump(mode="json")},
    )


app.include_router(cards_router)
app.include_router(game_router)
app.include_router(health_router)
app.include_router(scan_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
