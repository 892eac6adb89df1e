from sqlalchemy import Column, String, Integer, Text, DateTime

from careerbridge.database import Base


class CompanyProfile(Base):
    """Employer profile, one per email."""

    __tablename__ = "company_profiles"

    id = Column(String(24), primary_key=True)
    email = Column(String, unique=True, index=True, nullable=False)
    company_name = Column(String, nullable=False)
    industry = Column(String)
    registration_number = Column(String)
    founded_year = Column(Integer)
    team_size = Column(String)
    website = Column(String)
    phone = Column(String)
    address = Column(String)
    overview = Column(Text)
    linkedin = Column(String)
    twitter = Column(String)
    facebook = Column(String)
    instagram = Column(String)


class CandidateProfile(Base):
    """Job seeker profile, one per email. Asset columns hold blob references."""

    __tablename__ = "candidate_profiles"

    id = Column(String(24), primary_key=True)
    email = Column(String, unique=True, index=True, nullable=False)
    first_name = Column(String)
    last_name = Column(String)
    gender = Column(String)
    mobile = Column(String)
    city = Column(String)
    country = Column(String)
    experience_level = Column(String)
    education_level = Column(String)
    custom_education = Column(Text)
    custom_skills = Column(Text)
    custom_jobs = Column(Text)
    linkedin = Column(String)
    github = Column(String)
    resume_ref = Column(String)
    cover_letter_ref = Column(String)
    photo_ref = Column(String)
    intro_video_ref = Column(String)
    updated_at = Column(DateTime(timezone=True))
