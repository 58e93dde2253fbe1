"""End-to-end tests for the routes in src.api.app."""

import unittest

from fastapi.routing import APIRoute
from fastapi.testclient import TestClient

from src.api.app import create_app, format_number
from src.db import repository
from src.db.database import CampgroundDB, ReviewDB, Store
from src.models.campground import CampgroundIn, ReviewIn


class AppTestCase(unittest.TestCase):

    def setUp(self):
        self.store = Store("sqlite://").open()
        self.app = create_app(self.store)
        self.client = TestClient(self.app)

    def tearDown(self):
        self.store.close()

    def fetch_campground(self, campground_id):
        db = self.store.session()
        try:
            campground = repository.get_campground(db, campground_id)
            if campground:
                db.expunge(campground)
            return campground
        finally:
            db.close()

    def fetch_review(self, review_id):
        db = self.store.session()
        try:
            return db.get(ReviewDB, review_id)
        finally:
            db.close()

    def count(self, model):
        db = self.store.session()
        try:
            return db.query(model).count()
        finally:
            db.close()

    def seed_campground(self, title="Pine Ridge", reviews=0, **fields):
        db = self.store.session()
        try:
            campground = repository.create_campground(db, CampgroundIn(title=title, **fields))
            for i in range(reviews):
                repository.add_review(db, campground, ReviewIn(body=f"Review {i}", rating=4))
            return campground.id
        finally:
            db.close()

    def create_campground(self, **fields):
        data = {f"campground[{key}]": value for key, value in fields.items()}
        return self.client.post("/campgrounds", data=data, follow_redirects=False)


class TestPages(AppTestCase):
    """Tests for the read-only pages."""

    def test_home(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertIn("YelpCamp", response.text)

    def test_list_campgrounds(self):
        self.seed_campground("Pine Ridge")
        self.seed_campground("Misty Hollow")
        response = self.client.get("/campgrounds")
        self.assertEqual(response.status_code, 200)
        self.assertIn("Pine Ridge", response.text)
        self.assertIn("Misty Hollow", response.text)

    def test_new_form(self):
        response = self.client.get("/campgrounds/new")
        self.assertEqual(response.status_code, 200)
        self.assertIn('name="campground[title]"', response.text)

    def test_edit_form(self):
        campground_id = self.seed_campground(price=25, location="Boulder, CO")
        response = self.client.get(f"/campgrounds/{campground_id}/edit")
        self.assertEqual(response.status_code, 200)
        self.assertIn(f"/campgrounds/{campground_id}?_method=PUT", response.text)
        self.assertIn('value="25"', response.text)

    def test_missing_campground_is_404(self):
        for path in ("/campgrounds/missing", "/campgrounds/missing/edit"):
            with self.subTest(path=path):
                response = self.client.get(path)
                self.assertEqual(response.status_code, 404)
                self.assertIn("Campground not found", response.text)


class TestCreateCampground(AppTestCase):
    """Tests for POST /campgrounds."""

    def test_create_and_show(self):
        response = self.create_campground(title="Pine Ridge", price="25", location="Boulder, CO")

        self.assertEqual(response.status_code, 302)
        location = response.headers["location"]
        self.assertTrue(location.startswith("/campgrounds/"))
        campground_id = location.rsplit("/", 1)[1]

        campground = self.fetch_campground(campground_id)
        self.assertEqual(campground.title, "Pine Ridge")
        self.assertEqual(campground.price, 25)
        self.assertEqual(campground.location, "Boulder, CO")

        page = self.client.get(location)
        self.assertEqual(page.status_code, 200)
        self.assertIn("Pine Ridge", page.text)
        self.assertIn("25", page.text)

    def test_missing_title_is_400(self):
        response = self.create_campground(price="25", location="Boulder, CO")
        self.assertEqual(response.status_code, 400)
        self.assertIn("campground.title", response.text)
        self.assertIn("is required", response.text)
        self.assertEqual(self.count(CampgroundDB), 0)


class TestUpdateCampground(AppTestCase):
    """Tests for PUT /campgrounds/{id} through method override."""

    def test_update_via_query_override(self):
        campground_id = self.seed_campground(price=25, location="Boulder, CO", image="http://img", description="Quiet")

        response = self.client.post(
            f"/campgrounds/{campground_id}?_method=PUT",
            data={
                "campground[title]": "Pine Ridge North",
                "campground[location]": "Lyons, CO",
                "campground[price]": "30",
                "campground[image]": "http://other",
            },
            follow_redirects=False,
        )

        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.headers["location"], f"/campgrounds/{campground_id}")
        campground = self.fetch_campground(campground_id)
        self.assertEqual(campground.title, "Pine Ridge North")
        self.assertEqual(campground.location, "Lyons, CO")
        self.assertEqual(campground.price, 30)
        self.assertEqual(campground.image, "http://img")
        self.assertEqual(campground.description, "Quiet")

    def test_update_via_form_field_override(self):
        campground_id = self.seed_campground()
        response = self.client.post(
            f"/campgrounds/{campground_id}",
            data={"_method": "PUT", "campground[title]": "Renamed"},
            follow_redirects=False,
        )
        self.assertEqual(response.status_code, 302)
        self.assertEqual(self.fetch_campground(campground_id).title, "Renamed")

    def test_form_field_override_keeps_encoded_values(self):
        campground_id = self.seed_campground()
        response = self.client.post(
            f"/campgrounds/{campground_id}",
            content="campground%5Btitle%5D=Caf%C3%A9+%26+Camp&campground%5Blocation%5D=Boulder%2C+CO&_method=put",
            headers={"content-type": "application/x-www-form-urlencoded; charset=utf-8"},
            follow_redirects=False,
        )
        self.assertEqual(response.status_code, 302)
        campground = self.fetch_campground(campground_id)
        self.assertEqual(campground.title, "Café & Camp")
        self.assertEqual(campground.location, "Boulder, CO")

    def test_precise_price_survives_show_and_edit(self):
        response = self.create_campground(title="Pine Ridge", price="12345.67")
        campground_id = response.headers["location"].rsplit("/", 1)[1]

        self.assertIn("$12345.67/night", self.client.get(f"/campgrounds/{campground_id}").text)
        edit_page = self.client.get(f"/campgrounds/{campground_id}/edit").text
        self.assertIn('name="campground[price]" value="12345.67"', edit_page)

        # Save the edit form with only the title changed
        self.client.post(
            f"/campgrounds/{campground_id}?_method=PUT",
            data={"campground[title]": "Pine Ridge North", "campground[price]": "12345.67"},
        )
        campground = self.fetch_campground(campground_id)
        self.assertEqual(campground.title, "Pine Ridge North")
        self.assertEqual(campground.price, 12345.67)

    def test_invalid_update_is_400(self):
        campground_id = self.seed_campground()
        response = self.client.put(f"/campgrounds/{campground_id}", data={"campground[title]": ""})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(self.fetch_campground(campground_id).title, "Pine Ridge")

    def test_update_missing_campground_is_404(self):
        response = self.client.put("/campgrounds/missing", data={"campground[title]": "X"})
        self.assertEqual(response.status_code, 404)


class TestDeleteCampground(AppTestCase):
    """Tests for DELETE /campgrounds/{id}."""

    def test_delete_cascades_to_reviews(self):
        campground_id = self.seed_campground(reviews=2)
        other_id = self.seed_campground("Other", reviews=1)
        review_ids = self.fetch_campground(campground_id).reviews
        self.assertEqual(len(review_ids), 2)

        response = self.client.post(f"/campgrounds/{campground_id}?_method=DELETE", follow_redirects=False)

        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.headers["location"], "/campgrounds")
        self.assertIsNone(self.fetch_campground(campground_id))
        for review_id in review_ids:
            self.assertIsNone(self.fetch_review(review_id))
        self.assertEqual(self.count(ReviewDB), 1)
        self.assertIsNotNone(self.fetch_campground(other_id))

    def test_delete_missing_campground_is_404(self):
        response = self.client.delete("/campgrounds/missing")
        self.assertEqual(response.status_code, 404)


class TestReviews(AppTestCase):
    """Tests for the review routes."""

    def test_create_review(self):
        campground_id = self.seed_campground()

        response = self.client.post(
            f"/campgrounds/{campground_id}/reviews",
            data={"review[body]": "Great spot", "review[rating]": "5"},
            follow_redirects=False,
        )

        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.headers["location"], f"/campgrounds/{campground_id}")
        self.assertEqual(len(self.fetch_campground(campground_id).reviews), 1)

        page = self.client.get(f"/campgrounds/{campground_id}")
        self.assertIn("Great spot", page.text)
        self.assertIn("1 review", page.text)

    def test_non_numeric_rating_is_400(self):
        campground_id = self.seed_campground()

        response = self.client.post(
            f"/campgrounds/{campground_id}/reviews",
            data={"review[body]": "Great spot", "review[rating]": "excellent"},
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("review.rating", response.text)
        self.assertEqual(self.count(ReviewDB), 0)
        self.assertEqual(self.fetch_campground(campground_id).reviews, [])

    def test_review_for_missing_campground_is_404(self):
        response = self.client.post(
            "/campgrounds/missing/reviews",
            data={"review[body]": "Great spot", "review[rating]": "5"},
        )
        self.assertEqual(response.status_code, 404)
        self.assertEqual(self.count(ReviewDB), 0)

    def test_delete_review(self):
        campground_id = self.seed_campground(reviews=2)
        keep_id, drop_id = self.fetch_campground(campground_id).reviews

        response = self.client.post(
            f"/campgrounds/{campground_id}/reviews/{drop_id}",
            data={"_method": "DELETE"},
            follow_redirects=False,
        )

        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.headers["location"], f"/campgrounds/{campground_id}")
        self.assertEqual(self.fetch_campground(campground_id).reviews, [keep_id])
        self.assertIsNone(self.fetch_review(drop_id))
        self.assertIsNotNone(self.fetch_review(keep_id))
        self.assertEqual(self.count(CampgroundDB), 1)

    def test_delete_review_of_other_campground_is_404(self):
        campground_id = self.seed_campground()
        other_id = self.seed_campground("Other", reviews=1)
        review_id = self.fetch_campground(other_id).reviews[0]

        response = self.client.delete(f"/campgrounds/{campground_id}/reviews/{review_id}")

        self.assertEqual(response.status_code, 404)
        self.assertIsNotNone(self.fetch_review(review_id))


class TestErrors(AppTestCase):
    """Tests for the error pages."""

    def test_unknown_path_is_404(self):
        response = self.client.get("/nonexistent")
        self.assertEqual(response.status_code, 404)
        self.assertIn("Page not found", response.text)

    def test_unhandled_method_is_404(self):
        response = self.client.patch("/campgrounds")
        self.assertEqual(response.status_code, 404)
        self.assertIn("Page not found", response.text)

    def test_options_is_404(self):
        for path in ("/nonexistent", "/campgrounds"):
            with self.subTest(path=path):
                response = self.client.options(path)
                self.assertEqual(response.status_code, 404)
                self.assertIn("Page not found", response.text)

    def test_head_unknown_path_is_404(self):
        response = self.client.head("/nonexistent")
        self.assertEqual(response.status_code, 404)

    def test_store_failure_is_500(self):
        self.store.close()
        client = TestClient(self.app, raise_server_exceptions=False)
        response = client.get("/campgrounds")
        self.assertEqual(response.status_code, 500)
        self.assertIn("Store is not open", response.text)

    def test_error_without_message_uses_default(self):
        def boom():
            raise RuntimeError()

        self.app.router.routes.insert(0, APIRoute("/boom", boom))
        client = TestClient(self.app, raise_server_exceptions=False)
        response = client.get("/boom")
        self.assertEqual(response.status_code, 500)
        self.assertIn("Something went wrong!", response.text)


class TestLifecycle(unittest.TestCase):
    """Tests for opening and closing the store with the app."""

    def test_store_opened_and_closed_by_lifespan(self):
        store = Store("sqlite://")
        app = create_app(store)
        self.assertIs(app.state.store, store)
        with TestClient(app) as client:
            self.assertTrue(store.is_open)
            self.assertEqual(client.get("/campgrounds").status_code, 200)
        self.assertFalse(store.is_open)


class TestFormatNumber(unittest.TestCase):

    def test_format_number(self):
        self.assertEqual(format_number(25.0), "25")
        self.assertEqual(format_number(12.5), "12.5")
        self.assertEqual(format_number(12345.67), "12345.67")
        self.assertEqual(format_number(1234567.0), "1234567")
        self.assertEqual(format_number(None), "")


if __name__ == "__main__":
    unittest.main()
