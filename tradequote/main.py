from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import presets, quotes

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("tradequote")

app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description="Good/better/best quote calculator for trade-service proposals",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(quotes.router, prefix="/api")
app.include_router(presets.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "tradequote"}


@app.on_event("startup")
def log_startup():
    logger.info(f"{settings.APP_NAME} started, currency locale {settings.CURRENCY_LOCALE}")
