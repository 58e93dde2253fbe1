import logging

from src.db.database import CampgroundDB, ReviewDB, new_id

# Get logger
logger = logging.getLogger(__name__)

# Fields the edit form is allowed to change
UPDATABLE_FIELDS = ("title", "location", "price")


def list_campgrounds(db):
    return db.query(CampgroundDB).all()


def get_campground(db, campground_id):
    return db.query(CampgroundDB).filter(CampgroundDB.id == campground_id).first()


def get_reviews(db, campground):
    """Resolve a campground's review ids, keeping list order and skipping dangling ids."""
    review_ids = list(campground.reviews or [])
    if not review_ids:
        return []

    found = {
        review.id: review
        for review in db.query(ReviewDB).filter(ReviewDB.id.in_(review_ids)).all()
    }
    return [found[review_id] for review_id in review_ids if review_id in found]


def create_campground(db, data):
    campground = CampgroundDB(
        id=new_id(),
        title=data.title,
        price=data.price,
        image=data.image,
        description=data.description,
        location=data.location,
        reviews=[],
    )
    db.add(campground)
    db.commit()
    logger.info(f"Inserted: {campground.title} (ID: {campground.id})")
    return campground


def update_campground(db, campground, data):
    for field in UPDATABLE_FIELDS:
        setattr(campground, field, getattr(data, field))
    db.commit()
    logger.info(f"Updated: {campground.title} (ID: {campground.id})")
    return campground


def delete_campground(db, campground):
    """
    Delete a campground together with every review it references.

    Both steps share one commit, so a failure leaves neither half applied.

    Returns:
        Number of review records removed
    """
    review_ids = list(campground.reviews or [])
    campground_id, title = campground.id, campground.title
    removed = 0
    try:
        if review_ids:
            removed = (
                db.query(ReviewDB)
                .filter(ReviewDB.id.in_(review_ids))
                .delete(synchronize_session=False)
            )
        db.delete(campground)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Deleted: {title} (ID: {campground_id}) and {removed} reviews")
    return removed


def add_review(db, campground, data):
    review = ReviewDB(id=new_id(), body=data.body, rating=data.rating)
    db.add(review)
    # Reassign so the JSON column is flagged as modified
    campground.reviews = list(campground.reviews or []) + [review.id]
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Review {review.id} added to campground {campground.id}")
    return review


def delete_review(db, campground, review_id):
    """
    Detach a review from its campground and delete the review record.

    Returns False without touching anything when the campground does not
    reference review_id.
    """
    review_ids = list(campground.reviews or [])
    if review_id not in review_ids:
        return False

    campground.reviews = [r for r in review_ids if r != review_id]
    try:
        db.query(ReviewDB).filter(ReviewDB.id == review_id).delete(synchronize_session=False)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Review {review_id} removed from campground {campground.id}")
    return True


def delete_all(db):
    """Remove every campground and review. Used by the seed utility."""
    try:
        reviews = db.query(ReviewDB).delete(synchronize_session=False)
        campgrounds = db.query(CampgroundDB).delete(synchronize_session=False)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Deleted {campgrounds} campgrounds and {reviews} reviews")
    return campgrounds, reviews
