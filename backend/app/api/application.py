import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from ..database import get_db
from ..models.application import Application
from ..models.job import Job
from ..models.user import Role
from ..services.access_control import scope_applications
from ..services.projections import application_for_employer, application_for_seeker
from ..utils.dependencies import Principal
from ..utils.error_handlers import (
    ConflictError,
    NotFoundError,
    get_error_message,
    handle_database_error,
)
from ..utils.roles import any_authenticated, seeker_only
from ..utils.validation import validate_id, validate_message

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/applications", tags=["Applications"])


class ApplicationCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    job_id: str | None = Field(default=None, alias="jobId")
    message: str | None = None


def _find_application(db: Session, *, job_id: str, seeker_id: str) -> Application | None:
    return (
        db.query(Application)
        .filter(Application.job_id == job_id, Application.seeker_id == seeker_id)
        .first()
    )


@router.get("")
def list_applications(
    db: Session = Depends(get_db),
    user: Principal = Depends(any_authenticated),
):
    """Seekers see their own applications; employers see those to their jobs; admins see all."""
    q = db.query(Application).options(
        selectinload(Application.job).selectinload(Job.employer),
        selectinload(Application.seeker),
    )
    applications = scope_applications(q, user).order_by(Application.created_at.desc()).all()

    project = application_for_seeker if user.role == Role.SEEKER else application_for_employer
    return {"applications": [project(a) for a in applications]}


@router.post("", status_code=201)
def create_application(
    payload: ApplicationCreate,
    db: Session = Depends(get_db),
    user: Principal = Depends(seeker_only),
):
    job_id = validate_id(payload.job_id, "jobId")
    message = validate_message(payload.message)

    job = db.get(Job, job_id)
    if job is None:
        raise NotFoundError(get_error_message("job_not_found"))

    if _find_application(db, job_id=job_id, seeker_id=user.user_id):
        raise ConflictError(get_error_message("already_applied"))

    application = Application(job_id=job_id, seeker_id=user.user_id, message=message)
    try:
        db.add(application)
        db.commit()
        db.refresh(application)
    except SQLAlchemyError as e:
        db.rollback()
        # Lost a race with an identical submission: the unique constraint decides.
        raise handle_database_error(e, "creating application", conflict_message=get_error_message("already_applied"))

    logger.info("Seeker %s applied to job %s", user.user_id, job_id)
    return {"application": application_for_seeker(application)}
