"""
SafeSteps FastAPI Application

Main entry point for the SafeSteps backend, serving the user API stub and
opening the database connection at startup.

Author: SafeSteps Team
Date: 2026-10-16
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

import database
from logic.config import load_config
from server.users import router as users_router

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database connection; failures are logged, not raised."""
    database.connect_database()
    yield
    database.close_database()


app = FastAPI(title="SafeSteps API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users_router)


class HealthResponse(BaseModel):
    status: str
    database: str


@app.get("/", response_class=HTMLResponse)
def index():
    """Serve the API welcome banner."""
    return "Welcome to SafeSteps API"


@app.get("/api/health", response_model=HealthResponse)
def health():
    """Report whether the startup database connection succeeded.

    Returns:
        Service status and database connectivity.
    """
    return {
        "status": "ok",
        "database": "connected" if database.is_connected() else "disconnected",
    }


if __name__ == "__main__":
    import uvicorn

    config = load_config()
    logger.info("Server is running on port %s", config["port"])
    uvicorn.run(app, host=config["host"], port=config["port"])
