from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from ..database import Base
from ..utils.skills import decode_skills, encode_skills
from ._base import new_id, utcnow


class Job(Base):
    __tablename__ = "jobs"

    id = Column(String(36), primary_key=True, default=new_id)
    employer_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(150), nullable=False)
    description = Column(Text, nullable=False)
    skills = Column(Text, nullable=False, default="[]")  # JSON string list, order preserved
    location = Column(String(100), nullable=False)
    salary = Column(String(100), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    employer = relationship("User", back_populates="jobs")
    applications = relationship("Application", back_populates="job", order_by="Application.created_at.desc()")

    @property
    def skill_list(self) -> list[str]:
        return decode_skills(self.skills)

    @skill_list.setter
    def skill_list(self, values: list[str] | None) -> None:
        self.skills = encode_skills(values)
