# hipchat_notifier/main.py
from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging

from hipchat_notifier.logging_config import setup_logging
from hipchat_notifier.container import (
    get_container,
    init_container,
    is_container_initialized,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 시작/종료 시 실행"""
    setup_logging()

    logger.info("=" * 80)
    logger.info("🚀 Starting HipChat Notifier")
    logger.info("=" * 80)

    init_container()

    yield

    logger.info("=" * 80)
    logger.info("👋 Shutting down HipChat Notifier")
    logger.info("=" * 80)


app = FastAPI(
    title="HipChat Notifier",
    lifespan=lifespan
)


@app.get("/health")
async def health():
    """헬스체크 엔드포인트"""
    initialized = is_container_initialized()
    container = get_container()

    return {
        "status": "ok",
        "notification_types": [t.name for t in container.supported_types()],
        "container_initialized": initialized
    }
