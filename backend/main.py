from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from api import employees, guests, rooms, bookings
from config.app_config import APP_CONFIG
from constants import ServerConfig
from init_db import init_database
from utils.logging_utils import configure_logging, set_logging_context, clear_logging_context
import logging
import uuid

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(APP_CONFIG)
    init_database()
    logger.info("StaySphere backend started")
    yield
    logger.info("StaySphere backend stopped")


app = FastAPI(title="StaySphere API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(APP_CONFIG.cors_origins),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logging_context(request: Request, call_next):
    """Tag every log line emitted while handling a request with its request id."""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    set_logging_context(request_id=request_id, path=request.url.path)
    try:
        response = await call_next(request)
    finally:
        clear_logging_context()
    response.headers["X-Request-ID"] = request_id
    return response


app.include_router(employees.router, prefix=ServerConfig.API_PREFIX)
app.include_router(guests.router, prefix=ServerConfig.API_PREFIX)
app.include_router(rooms.router, prefix=ServerConfig.API_PREFIX)
app.include_router(bookings.router, prefix=ServerConfig.API_PREFIX)


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=ServerConfig.HOST, port=ServerConfig.PORT)
