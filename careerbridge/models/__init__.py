from careerbridge.models.account import Account
from careerbridge.models.profile import CompanyProfile, CandidateProfile
from careerbridge.models.job_posting import JobPosting
from careerbridge.models.application import Application
from careerbridge.models.saved_job import SavedJob
from careerbridge.models.blob import BlobFile, BlobChunk

__all__ = [
    "Account",
    "CompanyProfile",
    "CandidateProfile",
    "JobPosting",
    "Application",
    "SavedJob",
    "BlobFile",
    "BlobChunk",
]
