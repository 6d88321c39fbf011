"""
Role-selected query scoping.

Each listing has a table from Role to a function that narrows a SQLAlchemy
query with a WHERE clause, so rows outside the caller's scope are never loaded.
"""
from typing import Callable

from sqlalchemy.orm import Query

from ..models.application import Application
from ..models.job import Job
from ..models.user import Role
from ..utils.dependencies import Principal
from ..utils.error_handlers import AuthError

Scope = Callable[[Query, str], Query]


def _unscoped(query: Query, user_id: str) -> Query:
    return query


def _applications_of_seeker(query: Query, user_id: str) -> Query:
    return query.filter(Application.seeker_id == user_id)


def _applications_to_owned_jobs(query: Query, user_id: str) -> Query:
    return query.join(Job, Application.job_id == Job.id).filter(Job.employer_id == user_id)


def _jobs_owned(query: Query, user_id: str) -> Query:
    return query.filter(Job.employer_id == user_id)


APPLICATION_SCOPES: dict[Role, Scope] = {
    Role.SEEKER: _applications_of_seeker,
    Role.EMPLOYER: _applications_to_owned_jobs,
    Role.ADMIN: _unscoped,
}

# Seekers never reach the employer job listing (gated by role first).
EMPLOYER_JOB_SCOPES: dict[Role, Scope] = {
    Role.EMPLOYER: _jobs_owned,
    Role.ADMIN: _unscoped,
}


def scope_applications(query: Query, principal: Principal) -> Query:
    return APPLICATION_SCOPES[principal.role](query, principal.user_id)


def scope_employer_jobs(query: Query, principal: Principal) -> Query:
    scope = EMPLOYER_JOB_SCOPES.get(principal.role)
    if scope is None:
        raise AuthError()
    return scope(query, principal.user_id)
