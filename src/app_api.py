from __future__ import annotations

import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from artisan_core.logging_utils import log_event, setup_logging

# Load .env before settings are read.
load_dotenv()
setup_logging(default_level="INFO")
logger.info(log_event("logging.ready"))

from artisan_core.api import router as artisan_router
from artisan_core.config import settings
from artisan_core.history import PromptHistory
from artisan_core.service import ArtisanService


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(log_event("artisan.startup.begin", endpoint=settings.ARTISAN_API_ENDPOINT))
    app.state.artisan_service = ArtisanService()
    app.state.history = PromptHistory()
    logger.info(log_event("artisan.startup.done", history=settings.ARTISAN_HISTORY_PATH))
    yield
    logger.info(log_event("artisan.shutdown.done"))


app = FastAPI(
    title="Veo Prompt Artisan",
    description="Prompt drafting actions backed by the scene-prompt generation endpoint",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        item.strip()
        for item in os.getenv("ARTISAN_FRONTEND_ORIGINS", "http://localhost:5173").split(",")
        if item.strip()
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(artisan_router, prefix="/api")


@app.get("/api/health")
async def healthcheck():
    return {"status": "ok"}


if __name__ == "__main__":
    import argparse
    import uvicorn

    parser = argparse.ArgumentParser(description="Run the prompt artisan API server.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true")
    parser.add_argument(
        "--log-level",
        default=settings.ARTISAN_LOG_LEVEL,
        choices=["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"],
    )
    args = parser.parse_args()

    os.environ["ARTISAN_LOG_LEVEL"] = str(args.log_level).upper()
    setup_logging(default_level=str(args.log_level).upper())
    logger.info(log_event("server.run", host=args.host, port=args.port, reload=args.reload))
    uvicorn.run("app_api:app", host=args.host, port=args.port, reload=args.reload, log_config=None)
