from sqlalchemy import Column, DateTime, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from ..database import Base
from ._base import new_id, utcnow


class Application(Base):
    __tablename__ = "applications"
    __table_args__ = (
        # The API checks before inserting; this closes the concurrent double-submit gap.
        UniqueConstraint("job_id", "seeker_id", name="uq_applications_job_seeker"),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    job_id = Column(String(36), ForeignKey("jobs.id"), nullable=False, index=True)
    seeker_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    job = relationship("Job", back_populates="applications")
    seeker = relationship("User", back_populates="applications")
