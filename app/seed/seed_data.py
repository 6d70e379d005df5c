from datetime import datetime

from sqlalchemy.orm import Session

from app.models.menu_item_review import MenuItemReview
from app.models.recommendation import Recommendation
from app.models.ucsb_dining_commons_menu_item import UCSBDiningCommonsMenuItem


def seed_db(db: Session) -> None:
    """Seed the database with sample data."""

    # Clear existing data (optional - comment out if you want to preserve data)
    db.query(MenuItemReview).delete()
    db.query(UCSBDiningCommonsMenuItem).delete()
    db.query(Recommendation).delete()
    db.commit()

    # Dining commons menu items
    menu_items = [
        UCSBDiningCommonsMenuItem(dining_commons_code="ortega", name="Baked Pesto Pasta with Chicken", station="Entree Specials"),
        UCSBDiningCommonsMenuItem(dining_commons_code="ortega", name="Tofu Banh Mi Sandwich (v)", station="Entree Specials"),
        UCSBDiningCommonsMenuItem(dining_commons_code="de-la-guerra", name="Chicken Caesar Salad", station="Salads"),
    ]
    db.add_all(menu_items)
    db.commit()
    for menu_item in menu_items:
        db.refresh(menu_item)

    # Reviews for the first two items
    db.add_all([
        MenuItemReview(
            item_id=menu_items[0].id,
            reviewer_email="cgaucho@ucsb.edu",
            stars=5,
            comments="Best pasta on campus",
            date_reviewed=datetime(2022, 1, 3, 12, 0, 0),
        ),
        MenuItemReview(
            item_id=menu_items[1].id,
            reviewer_email="ldelplaya@ucsb.edu",
            stars=3,
            comments="Bread was a little dry",
            date_reviewed=datetime(2022, 1, 4, 18, 30, 0),
        ),
    ])

    # Recommendation requests
    db.add_all([
        Recommendation(
            requester_email="cgaucho@ucsb.edu",
            professor_email="phtcon@ucsb.edu",
            explanation="BS/MS program",
            date_requested=datetime(2022, 4, 20, 0, 0, 0),
            date_needed=datetime(2022, 5, 1, 0, 0, 0),
            done=False,
        ),
        Recommendation(
            requester_email="ldelplaya@ucsb.edu",
            professor_email="richert@ucsb.edu",
            explanation="PhD CS Stanford",
            date_requested=datetime(2022, 5, 20, 0, 0, 0),
            date_needed=datetime(2022, 11, 15, 0, 0, 0),
            done=True,
        ),
    ])
    db.commit()
