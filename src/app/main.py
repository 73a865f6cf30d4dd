import os
import sys
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from loguru import logger
from .deps import get_printful_client, get_store
from .routers import bulk, catalog, health, uploads

logger.remove()
logger.add(
    sys.stderr,
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
)

app = FastAPI(title="PrintFlow: bulk Printful product generator")

app.include_router(health.router, prefix="/api", tags=["health"])
app.include_router(uploads.router)
app.include_router(bulk.router)
app.include_router(catalog.router)

app.mount("/uploads", StaticFiles(directory=str(get_store().root)), name="uploads")

logger.info(f"Printful token: {'set' if get_printful_client().configured else 'missing, set PRINTFUL_TOKEN'}")
