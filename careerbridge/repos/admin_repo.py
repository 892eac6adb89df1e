"""Admin-specific repository functions for stats."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from careerbridge.models.account import Account
from careerbridge.models.application import Application, STATUS_PENDING
from careerbridge.models.job_posting import JobPosting


def get_stats(db: Session) -> dict:
    """Return admin dashboard stats."""
    total_jobs = db.query(func.count(JobPosting.id)).scalar() or 0
    total_users = db.query(func.count(Account.id)).scalar() or 0
    pending = db.query(func.count(Application.id)).filter(Application.status == STATUS_PENDING).scalar() or 0
    return {
        "total_jobs": total_jobs,
        "total_users": total_users,
        "pending_applications": pending,
    }
