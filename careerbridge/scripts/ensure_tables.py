"""
Create any missing tables without touching existing data.
Usage: python -m careerbridge.scripts.ensure_tables
"""
from careerbridge.config import settings
from careerbridge.database import Database


def main():
    database = Database(settings.database_url)
    try:
        created = database.create_all()
    finally:
        database.dispose()
    print(f"DB table check complete: created {len(created)} missing table(s).")


if __name__ == "__main__":
    main()
