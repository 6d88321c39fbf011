from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session, selectinload

from ..database import get_db
from ..models.application import Application
from ..models.job import Job
from ..services.access_control import scope_employer_jobs
from ..services.projections import application_public, job_public, seeker_brief
from ..utils.dependencies import Principal
from ..utils.roles import employer_or_admin

router = APIRouter(prefix="/employer", tags=["Employer"])


@router.get("/jobs")
def list_employer_jobs(
    db: Session = Depends(get_db),
    user: Principal = Depends(employer_or_admin),
):
    """Jobs the caller owns (all jobs for an admin), each with its applicants."""
    q = db.query(Job).options(
        selectinload(Job.applications).selectinload(Application.seeker),
    )
    jobs = scope_employer_jobs(q, user).order_by(Job.created_at.desc()).all()

    return {
        "jobs": [
            {
                **job_public(job),
                "applications": [
                    {**application_public(a), "seeker": seeker_brief(a.seeker, with_experience=True)}
                    for a in job.applications
                ],
            }
            for job in jobs
        ]
    }
