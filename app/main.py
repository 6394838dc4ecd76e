import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .api.endpoints import response
from .core.config import settings
from .core.logging_config import setup_logging
from .database import create_db_and_tables, engine

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


# --- Lifecycle Events ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting")
    await create_db_and_tables()
    yield
    logger.info("Application shutting down")
    await engine.dispose()


# --- FastAPI App Instanz ---
app = FastAPI(title="Survey Backend", lifespan=lifespan)

# --- CORS Middleware (für Frontend-Zugriff) ---
origins = settings.BACKEND_ALLOWED_ORIGINS
logger.info("CORS: allowed origins %s", origins)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- API Endpunkte ---
@app.get("/", response_class=PlainTextResponse)
async def read_root():
    return "Survey Backend API is running. Use /api/submit or /api/results."


app.include_router(response.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
