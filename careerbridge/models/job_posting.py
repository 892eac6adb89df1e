from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func

from careerbridge.database import Base
from careerbridge.models.columns import JSONDocument


class JobPosting(Base):
    __tablename__ = "job_postings"

    id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    location = Column(String)
    salary = Column(String)
    employment_type = Column("type", String)
    deadline = Column(String)
    about_job = Column(Text)
    about_you = Column(Text)
    what_we_look_for = Column(Text)
    must_have = Column(JSONDocument, nullable=False, default=list)
    benefits = Column(Text)
    # Owner; resolved against company_profiles.email when the posting is created
    email = Column(String, index=True, nullable=False)
    # Snapshot of the owner's company name at creation time, never re-derived
    company_name = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
