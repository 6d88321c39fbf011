from fastapi import APIRouter, Depends, Query
from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from ..config import ADMIN_RECENT_LIMIT
from ..database import get_db
from ..models.application import Application
from ..models.job import Job
from ..models.user import User
from ..services.projections import application_admin_row, job_public, user_admin_row
from ..utils.dependencies import Principal
from ..utils.roles import admin_only

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/overview")
def overview(
    limit: int = Query(default=ADMIN_RECENT_LIMIT, ge=1, le=500),
    db: Session = Depends(get_db),
    user: Principal = Depends(admin_only),
):
    """Platform totals plus the most recent users, jobs and applications."""
    counts = {
        "totalUsers": db.query(func.count(User.id)).scalar() or 0,
        "totalJobs": db.query(func.count(Job.id)).scalar() or 0,
        "totalApplications": db.query(func.count(Application.id)).scalar() or 0,
    }

    users = db.query(User).order_by(User.created_at.desc()).limit(limit).all()
    jobs = (
        db.query(Job)
        .options(selectinload(Job.employer))
        .order_by(Job.created_at.desc())
        .limit(limit)
        .all()
    )
    applications = (
        db.query(Application)
        .options(selectinload(Application.job), selectinload(Application.seeker))
        .order_by(Application.created_at.desc())
        .limit(limit)
        .all()
    )

    return {
        "counts": counts,
        "users": [user_admin_row(u) for u in users],
        "jobs": [job_public(j, with_employer=True) for j in jobs],
        "applications": [application_admin_row(a) for a in applications],
    }
