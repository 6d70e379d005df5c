from datetime import datetime

from fastapi import status

from app.models.menu_item_review import MenuItemReview

BASE = "/api/MenuItemReview"


def _add_review(db, **overrides):
    fields = dict(
        item_id=1,
        reviewer_email="cgaucho@ucsb.edu",
        stars=4,
        comments="Pretty good",
        date_reviewed=datetime(2022, 1, 3, 12, 0, 0),
    )
    fields.update(overrides)
    review = MenuItemReview(**fields)
    db.add(review)
    db.commit()
    db.refresh(review)
    return review


def test_logged_out_users_cannot_get_all(client):
    response = client.get(f"{BASE}/all")
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_logged_out_users_cannot_delete(client):
    response = client.delete(f"{BASE}?id=1")
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_regular_users_cannot_delete(client, db_session, as_user):
    review = _add_review(db_session)
    response = client.delete(f"{BASE}?id={review.id}")
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert db_session.query(MenuItemReview).count() == 1


def test_logged_out_users_cannot_get_by_id(client, db_session):
    review = _add_review(db_session)
    response = client.get(f"{BASE}?id={review.id}")
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_logged_out_users_cannot_put(client, db_session):
    review = _add_review(db_session)
    response = client.put(f"{BASE}?id={review.id}", json={"stars": 1})
    assert response.status_code == status.HTTP_403_FORBIDDEN
    db_session.refresh(review)
    assert review.stars != 1


def test_regular_users_cannot_put(client, db_session, as_user):
    review = _add_review(db_session)
    response = client.put(f"{BASE}?id={review.id}", json={"stars": 1})
    assert response.status_code == status.HTTP_403_FORBIDDEN
    db_session.refresh(review)
    assert review.stars != 1


def test_regular_users_cannot_put_malformed_body(client, db_session, as_user):
    review = _add_review(db_session)
    response = client.put(
        f"{BASE}?id={review.id}",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_user_can_get_all_reviews(client, seeded_db, as_user):
    response = client.get(f"{BASE}/all")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert len(data) == 2
    assert {r["stars"] for r in data} == {5, 3}


def test_user_can_get_review_by_id(client, db_session, as_user):
    review = _add_review(db_session)

    response = client.get(f"{BASE}?id={review.id}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "id": review.id,
        "itemId": 1,
        "reviewerEmail": "cgaucho@ucsb.edu",
        "stars": 4,
        "comments": "Pretty good",
        "dateReviewed": "2022-01-03T12:00:00",
    }


def test_get_review_that_does_not_exist(client, as_user):
    response = client.get(f"{BASE}?id=15")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {
        "type": "EntityNotFoundException",
        "message": "MenuItemReview with id 15 not found",
    }


def test_admin_can_post_a_review(client, db_session, as_admin):
    response = client.post(
        f"{BASE}/post",
        params={
            "itemId": 27,
            "reviewerEmail": "ldelplaya@ucsb.edu",
            "stars": 2,
            "comments": "Cold fries",
            "dateReviewed": "2022-02-14T18:45:00",
        },
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["itemId"] == 27
    assert data["reviewerEmail"] == "ldelplaya@ucsb.edu"
    assert data["stars"] == 2
    assert data["comments"] == "Cold fries"
    assert data["dateReviewed"] == "2022-02-14T18:45:00"
    assert db_session.query(MenuItemReview).filter(MenuItemReview.id == data["id"]).count() == 1


def test_regular_users_cannot_post(client, as_user):
    response = client.post(
        f"{BASE}/post",
        params={
            "itemId": 27,
            "reviewerEmail": "ldelplaya@ucsb.edu",
            "stars": 2,
            "comments": "Cold fries",
            "dateReviewed": "2022-02-14T18:45:00",
        },
    )
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_post_rejects_bad_date(client, as_admin):
    response = client.post(
        f"{BASE}/post",
        params={
            "itemId": 27,
            "reviewerEmail": "ldelplaya@ucsb.edu",
            "stars": 2,
            "comments": "Cold fries",
            "dateReviewed": "yesterday",
        },
    )
    assert response.status_code == 422


def test_post_rejects_item_id_beyond_64_bits(client, db_session, as_admin):
    response = client.post(
        f"{BASE}/post",
        params={
            "itemId": "99999999999999999999",
            "reviewerEmail": "ldelplaya@ucsb.edu",
            "stars": 2,
            "comments": "Cold fries",
            "dateReviewed": "2022-02-14T18:45:00",
        },
    )
    assert response.status_code == 422
    assert db_session.query(MenuItemReview).count() == 0


def test_post_rejects_date_with_utc_offset(client, db_session, as_admin):
    response = client.post(
        f"{BASE}/post",
        params={
            "itemId": 27,
            "reviewerEmail": "ldelplaya@ucsb.edu",
            "stars": 2,
            "comments": "Cold fries",
            "dateReviewed": "2022-02-14T18:45:00-08:00",
        },
    )
    assert response.status_code == 422
    assert db_session.query(MenuItemReview).count() == 0


def test_delete_rejects_ids_beyond_64_bits(client, as_admin):
    response = client.delete(f"{BASE}?id=-99999999999999999999")
    assert response.status_code == 422


def test_admin_can_delete_a_review(client, db_session, as_admin):
    review = _add_review(db_session)
    review_id = review.id

    response = client.delete(f"{BASE}?id={review_id}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": f"MenuItemReview with id {review_id} deleted"}
    assert db_session.query(MenuItemReview).count() == 0

    # Removal is observable
    response = client.get(f"{BASE}?id={review_id}")
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_admin_cannot_delete_review_that_does_not_exist(client, as_admin):
    response = client.delete(f"{BASE}?id=15")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["message"] == "MenuItemReview with id 15 not found"


def test_admin_can_edit_a_review(client, db_session, as_admin):
    review = _add_review(db_session)
    other = _add_review(db_session, comments="Untouched")

    response = client.put(
        f"{BASE}?id={review.id}",
        json={
            "id": other.id,
            "itemId": 2,
            "reviewerEmail": "ldelplaya@ucsb.edu",
            "stars": 1,
            "comments": "Got worse",
            "dateReviewed": "2022-03-01T09:00:00",
        },
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["id"] == review.id
    assert data["stars"] == 1
    assert data["comments"] == "Got worse"

    db_session.refresh(other)
    assert other.comments == "Untouched"


def test_admin_cannot_edit_review_that_does_not_exist(client, as_admin):
    response = client.put(f"{BASE}?id=15", json={"stars": 5})
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["message"] == "MenuItemReview with id 15 not found"


def test_update_rejects_item_id_beyond_64_bits(client, db_session, as_admin):
    review = _add_review(db_session)
    original_item_id = review.item_id

    response = client.put(f"{BASE}?id={review.id}", json={"itemId": 2**63, "stars": 1})

    assert response.status_code == 422
    assert response.json()["detail"][0]["loc"] == ["body", "itemId"]
    db_session.refresh(review)
    assert review.item_id == original_item_id


def test_update_rejects_date_with_utc_offset(client, db_session, as_admin):
    review = _add_review(db_session)

    response = client.put(f"{BASE}?id={review.id}", json={"dateReviewed": "2022-03-01T09:00:00+00:00"})

    assert response.status_code == 422


def test_admin_update_with_malformed_body_is_rejected(client, db_session, as_admin):
    review = _add_review(db_session)
    response = client.put(
        f"{BASE}?id={review.id}",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422
