from .application import Application
from .job import Job
from .user import Role, User

__all__ = ["Application", "Job", "Role", "User"]
