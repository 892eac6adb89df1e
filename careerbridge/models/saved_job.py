from sqlalchemy import Column, String, DateTime, UniqueConstraint

from careerbridge.database import Base


class SavedJob(Base):
    """Candidate bookmark on a job posting."""

    __tablename__ = "saved_jobs"
    __table_args__ = (
        UniqueConstraint("user_email", "job_id", name="uq_saved_jobs_user_job"),
    )

    id = Column(String(24), primary_key=True)
    user_email = Column(String, index=True, nullable=False)
    job_id = Column(String, index=True, nullable=False)
    saved_at = Column(DateTime(timezone=True), nullable=False)
