import logging
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

load_dotenv()

DEFAULT_LOG_FILE = os.path.join(os.path.dirname(__file__), "..", "logs.txt")


def configure_logging() -> None:
    """Console logging plus an append-only file; LOG_FILE="" disables the file."""
    log_file = os.getenv("LOG_FILE", DEFAULT_LOG_FILE)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a"))
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )


def cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "http://localhost:3000")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


configure_logging()
logger = logging.getLogger(__name__)

from backend.api.routes import router

app = FastAPI(
    title="Startup Valuation Engine",
    description="Blended DCF, revenue-multiple and comparables valuation for startups",
    version="1.0.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
app.include_router(router)

logger.info(f"Startup Valuation Engine ready (CORS origins: {', '.join(cors_origins())})")


@app.get("/")
async def root():
    return {"message": "Startup Valuation Engine API", "docs": "/docs", "valuations": router.prefix}
