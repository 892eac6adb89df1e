from sqlalchemy import Column, String, DateTime, UniqueConstraint

from careerbridge.database import Base
from careerbridge.models.columns import JSONDocument

STATUS_PENDING = "Pending"
STATUS_ACCEPTED = "Accepted"
STATUS_REJECTED = "Rejected"
APPLICATION_STATUSES = (STATUS_PENDING, STATUS_ACCEPTED, STATUS_REJECTED)
TERMINAL_STATUSES = (STATUS_ACCEPTED, STATUS_REJECTED)


class Application(Base):
    """A candidate's application to one job posting."""

    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("job_id", "user_email", name="uq_applications_job_user"),
    )

    id = Column(String(24), primary_key=True, index=True)
    # No FK: applications outlive a deleted posting
    job_id = Column(String, index=True, nullable=False)
    user_email = Column(String, index=True, nullable=False)
    candidate_snapshot = Column(JSONDocument, nullable=False)
    resume_ref = Column(String)
    cover_letter_ref = Column(String)
    applied_at = Column(DateTime(timezone=True), nullable=False)
    status = Column(String(16), nullable=False, default=STATUS_PENDING, index=True)
