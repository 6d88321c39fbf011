import logging

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from ..database import get_db
from ..models.job import Job
from ..models.user import Role, User
from ..services.matching import find_matching_seekers, match_score, sort_by_match
from ..services.projections import job_public, seeker_brief
from ..utils.dependencies import Principal
from ..utils.error_handlers import handle_database_error
from ..utils.roles import employer_or_admin
from ..utils.validation import validate_skills, validate_string_field

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["Jobs"])


class JobCreate(BaseModel):
    title: str | None = None
    description: str | None = None
    skills: list[str] | None = None
    location: str | None = None
    salary: str | None = None


def _seeker_skills(db: Session, seeker_id: str | None) -> list[str] | None:
    """Skills of the feed owner, or None when there is no (resolvable) seeker context."""
    if not seeker_id:
        return None
    seeker = db.get(User, seeker_id)
    if seeker is None:
        return None
    return seeker.skill_list


@router.get("")
def list_jobs(
    search: str | None = Query(default=None),
    location: str | None = Query(default=None),
    seeker_id: str | None = Query(default=None, alias="seekerId"),
    db: Session = Depends(get_db),
):
    """
    Public job feed, newest first.

    `search` matches title or description, `location` matches location (both
    substring). With `seekerId`, every job gets a `matchScore` and the feed is
    reordered by it; without one `matchScore` is null.
    """
    q = db.query(Job).options(selectinload(Job.employer))
    if search:
        q = q.filter(or_(
            Job.title.contains(search, autoescape=True),
            Job.description.contains(search, autoescape=True),
        ))
    if location:
        q = q.filter(Job.location.contains(location, autoescape=True))
    jobs = q.order_by(Job.created_at.desc()).all()

    seeker_skills = _seeker_skills(db, seeker_id)
    items = []
    for job in jobs:
        payload = job_public(job, with_employer=True)
        payload["matchScore"] = match_score(seeker_skills, payload["skills"])
        items.append(payload)

    return {"jobs": sort_by_match(items)}


@router.post("", status_code=201)
def create_job(
    payload: JobCreate,
    db: Session = Depends(get_db),
    user: Principal = Depends(employer_or_admin),
):
    title = validate_string_field(payload.title, "title", min_length=2, max_length=150)
    description = validate_string_field(payload.description, "description", min_length=10, max_length=20000)
    location = validate_string_field(payload.location, "location", min_length=2, max_length=100)
    salary = validate_string_field(payload.salary, "salary", max_length=100, required=False)
    skills = validate_skills(payload.skills)

    job = Job(
        employer_id=user.user_id,
        title=title,
        description=description,
        location=location,
        salary=salary,
    )
    job.skill_list = skills
    try:
        db.add(job)
        db.commit()
        db.refresh(job)
    except SQLAlchemyError as e:
        db.rollback()
        raise handle_database_error(e, "creating job")

    # Notification fan-out list only; nothing is stored.
    seekers = (
        db.query(User)
        .filter(User.role == Role.SEEKER.value)
        .order_by(User.created_at.asc())
        .all()
    )
    matches = find_matching_seekers(job.skill_list, seekers)
    logger.info("Job %s created by %s (%d matching seekers)", job.id, user.user_id, len(matches))

    return {
        "job": job_public(job),
        "matches": [seeker_brief(s) for s in matches],
    }
