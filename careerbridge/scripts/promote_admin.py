"""
Promote an account to admin by email.
Usage: python -m careerbridge.scripts.promote_admin user@example.com
"""
import sys

from careerbridge.config import settings
from careerbridge.core.errors import NotFoundError
from careerbridge.database import Database
from careerbridge.models.account import ROLE_ADMIN
from careerbridge.repos.user_repo import set_role


def main(database: Database | None = None):
    if len(sys.argv) < 2:
        print("Usage: python -m careerbridge.scripts.promote_admin <email>")
        sys.exit(1)
    email = sys.argv[1].strip()
    database = database or Database(settings.database_url)
    database.create_all()
    db = database.session()
    try:
        set_role(db, email, ROLE_ADMIN)
        print(f"Promoted {email} to admin.")
    except NotFoundError:
        print(f"User not found: {email}")
        sys.exit(1)
    finally:
        db.close()


if __name__ == "__main__":
    main()
