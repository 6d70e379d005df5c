"""
Create tables and load sample dining commons data.
Run with: python seed_db.py
"""
from dotenv import load_dotenv

# Settings are read at import time, so the .env must be loaded first
load_dotenv()

from app.db.session import SessionLocal, init_db  # noqa: E402
from app.models import MenuItemReview, Recommendation, UCSBDiningCommonsMenuItem  # noqa: E402
from app.seed.seed_data import seed_db  # noqa: E402


def main():
    init_db()

    with SessionLocal() as db:
        seed_db(db)
        for model in (UCSBDiningCommonsMenuItem, MenuItemReview, Recommendation):
            print(f"{model.__tablename__}: {db.query(model).count()} rows")


if __name__ == "__main__":
    main()
