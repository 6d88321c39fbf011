from enum import Enum

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import relationship

from ..database import Base
from ..utils.skills import decode_skills, encode_skills
from ._base import new_id, utcnow


class Role(str, Enum):
    EMPLOYER = "EMPLOYER"
    SEEKER = "SEEKER"
    ADMIN = "ADMIN"


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)  # always lower-cased
    password = Column(String(255), nullable=False)  # store hashed password
    role = Column(String(20), nullable=False, index=True)  # EMPLOYER / SEEKER / ADMIN
    skills = Column(Text, nullable=False, default="[]")  # JSON string list
    experience = Column(Text, nullable=True)
    preferred_role = Column(String(255), nullable=True)
    preferred_location = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Relationships
    jobs = relationship("Job", back_populates="employer")
    applications = relationship("Application", back_populates="seeker")

    @property
    def skill_list(self) -> list[str]:
        return decode_skills(self.skills)

    @skill_list.setter
    def skill_list(self, values: list[str] | None) -> None:
        self.skills = encode_skills(values)
