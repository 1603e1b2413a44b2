from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import get_settings
from app.core.error_handlers import register_exception_handlers
from app.core.telemetry import setup_telemetry
from app.database.database import create_db_and_tables
from app.routers import adoption, auth, cat, donation, realtime, stats
from app.services.realtime import BroadcastChannel
from app.utils.logger import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Perform application startup tasks before the FastAPI app begins serving requests.

    Sets up logging, creates the database tables and initializes telemetry.
    The broadcast channel is created with the app so it also exists when the
    lifespan is not run (e.g. a TestClient used without a `with` block).
    """
    setup_logging()
    create_db_and_tables()
    setup_telemetry(app)
    yield


app = FastAPI(
    title="Cat Shelter API",
    description="Statistics, donations and adoption records for the cat shelter dashboard",
    lifespan=lifespan,
)

# One channel per process; every dashboard socket on this worker registers here
app.state.channel = BroadcastChannel()

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/api/health", include_in_schema=False)
def health_check():
    """
    Provide the application's liveness state for health checks.

    Returns:
        dict: `{"status": "ok"}` while the process is serving requests.
    """
    return {"status": "ok"}


app.include_router(auth.router)
app.include_router(stats.router)
app.include_router(cat.router)
app.include_router(adoption.router)
app.include_router(donation.router)
app.include_router(realtime.router)
