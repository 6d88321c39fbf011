import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import admin as admin_api
from .api import application as application_api
from .api import auth as auth_api
from .api import employer as employer_api
from .api import job as job_api
from .api import profile as profile_api
from .config import FRONTEND_ORIGINS, LOG_LEVEL
from .database import init_db
from .utils.error_handlers import register_exception_handlers

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Job Board")

app.include_router(auth_api.router)
app.include_router(job_api.router)
app.include_router(employer_api.router)
app.include_router(application_api.router)
app.include_router(profile_api.router)
app.include_router(admin_api.router)

register_exception_handlers(app)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {
        "status": "Backend running",
        "service": "Job Board"
    }


_default_origins = ["http://localhost:3000", "http://127.0.0.1:3000"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=[*_default_origins, *FRONTEND_ORIGINS],
    allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup() -> None:
    # create_all() only adds missing tables; run backend/migrate.py for indexes on old DBs.
    init_db()
    logger.info("Job Board backend started")
