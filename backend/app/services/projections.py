"""
Public JSON shapes of the ORM rows. Keys are camelCase to match the frontend,
and nothing here ever exposes the password hash.
"""
from datetime import datetime

from ..models.application import Application
from ..models.job import Job
from ..models.user import User


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if isinstance(value, datetime) else value


def user_public(user: User) -> dict:
    """Projection returned by signup/login/profile."""
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role,
        "skills": user.skill_list,
        "experience": user.experience,
        "preferredRole": user.preferred_role,
        "preferredLocation": user.preferred_location,
    }


def user_contact(user: User) -> dict:
    return {"id": user.id, "name": user.name, "email": user.email}


def seeker_brief(user: User, *, with_experience: bool = False) -> dict:
    payload = {**user_contact(user), "skills": user.skill_list}
    if with_experience:
        payload["experience"] = user.experience
    return payload


def user_admin_row(user: User) -> dict:
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role,
        "createdAt": _iso(user.created_at),
    }


def job_public(job: Job, *, with_employer: bool = False) -> dict:
    payload = {
        "id": job.id,
        "title": job.title,
        "description": job.description,
        "skills": job.skill_list,
        "location": job.location,
        "salary": job.salary,
        "employerId": job.employer_id,
        "createdAt": _iso(job.created_at),
    }
    if with_employer and job.employer is not None:
        payload["employer"] = user_contact(job.employer)
    return payload


def application_public(application: Application) -> dict:
    return {
        "id": application.id,
        "jobId": application.job_id,
        "seekerId": application.seeker_id,
        "message": application.message,
        "createdAt": _iso(application.created_at),
    }


def application_for_seeker(application: Application) -> dict:
    """A seeker sees the job they applied to and who posted it."""
    return {**application_public(application), "job": job_public(application.job, with_employer=True)}


def application_for_employer(application: Application) -> dict:
    """An employer (or admin) sees the job and the applicant."""
    return {
        **application_public(application),
        "job": job_public(application.job),
        "seeker": seeker_brief(application.seeker, with_experience=True),
    }


def application_admin_row(application: Application) -> dict:
    return {
        **application_public(application),
        "job": {"id": application.job.id, "title": application.job.title},
        "seeker": user_contact(application.seeker),
    }
