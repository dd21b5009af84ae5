# tests/test_media.py

import unittest
from pydantic import ValidationError as SchemaValidationError
from mediarating.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from mediarating.schemas.media import MediaCreate, MediaSearch, MediaUpdate
from mediarating.services.media_service import MediaService
from mediarating.services.rating_service import RatingService
from tests.base import DatabaseTestCase


class MediaTestCase(DatabaseTestCase):
    def setUp(self):
        super().setUp()
        self.media_service = MediaService(self.db)
        self.ratings = RatingService(self.db, self.media_service)

        self.alice = self.make_user("alice")
        self.bob = self.make_user("bob")
        self.dune = self.make_media(self.bob.user_id, "Dune", ["Sci-Fi"], media_type="movie", rating=8)
        self.arrival = self.make_media(self.bob.user_id, "Arrival", ["sci-fi", "drama"], media_type="movie")
        self.notebook = self.make_media(self.bob.user_id, "The Notebook", ["romance"], media_type="movie")
        self.cars = self.make_media(self.alice.user_id, "Cars", ["animation"], media_type="series")

    def titles(self, entries):
        return [entry.title for entry in entries]


class TestMediaCrud(MediaTestCase):
    def test_create_normalizes_genres(self):
        media = self.make_media(self.alice.user_id, "  Heat  ", [" Crime ", "crime", "Thriller"])
        self.assertEqual(media.title, "Heat")
        self.assertEqual(media.genres, ["crime", "thriller"])
        self.assertEqual(media.user_id, self.alice.user_id)

    def test_schema_rejects_out_of_range_values(self):
        with self.assertRaises(SchemaValidationError):
            MediaCreate(title="x", rating=11)
        with self.assertRaises(SchemaValidationError):
            MediaCreate(title="x", age_restriction=7)
        with self.assertRaises(SchemaValidationError):
            MediaCreate(title="x", release_year=1800)
        with self.assertRaises(SchemaValidationError):
            MediaCreate(title="x", media_type="book")

    def test_blank_title(self):
        with self.assertRaises(ValidationError):
            self.media_service.create_media(MediaCreate(title="  "), self.alice.user_id)

    def test_update_is_owner_only_and_partial(self):
        with self.assertRaises(ForbiddenError):
            self.media_service.update_media(self.dune.id, MediaUpdate(title="Dune 2"), self.alice.user_id)

        updated = self.media_service.update_media(
            self.dune.id, MediaUpdate(title="Dune: Part One", genres=["sci-fi", "adventure"]), self.bob.user_id
        )
        self.assertEqual(updated.title, "Dune: Part One")
        self.assertEqual(updated.rating, 8)
        self.assertEqual(updated.genres, ["adventure", "sci-fi"])

    def test_delete_cascades(self):
        rating = self.ratings.set_rating(self.alice.user_id, self.dune.id, 5)
        with self.assertRaises(ForbiddenError):
            self.media_service.delete_media(self.dune.id, self.alice.user_id)

        self.media_service.delete_media(self.dune.id, self.bob.user_id)
        with self.assertRaises(NotFoundError):
            self.media_service.get_media(self.dune.id)
        with self.assertRaises(NotFoundError):
            self.ratings.get_rating(rating.id)

    def test_unknown_media(self):
        with self.assertRaises(NotFoundError):
            self.media_service.get_media(9999)
        with self.assertRaises(NotFoundError):
            self.media_service.delete_media(9999, self.bob.user_id)


class TestMediaSearch(MediaTestCase):
    def test_no_filters_lists_everything_by_id(self):
        self.assertEqual(
            self.titles(self.media_service.list_media()),
            ["Dune", "Arrival", "The Notebook", "Cars"],
        )

    def test_title_is_case_insensitive_substring(self):
        self.assertEqual(self.titles(self.media_service.list_media(MediaSearch(title="UN"))), ["Dune"])

    def test_filters_combine(self):
        found = self.media_service.list_media(MediaSearch(genre="SCI-FI", user_id=self.bob.user_id))
        self.assertEqual(self.titles(found), ["Dune", "Arrival"])

        found = self.media_service.list_media(MediaSearch(media_type="series"))
        self.assertEqual(self.titles(found), ["Cars"])

        found = self.media_service.list_media(MediaSearch(rating=8))
        self.assertEqual(self.titles(found), ["Dune"])

    def test_sort_by(self):
        by_title = self.media_service.list_media(MediaSearch(sort_by="title"))
        self.assertEqual(self.titles(by_title), ["Arrival", "Cars", "Dune", "The Notebook"])

        self.ratings.set_rating(self.alice.user_id, self.notebook.id, 5)
        self.ratings.set_rating(self.alice.user_id, self.arrival.id, 3)
        by_score = self.media_service.list_media(MediaSearch(sort_by="score"))
        self.assertEqual(self.titles(by_score)[:2], ["The Notebook", "Arrival"])

    def test_unknown_sort_by(self):
        with self.assertRaises(ValidationError):
            self.media_service.list_media(MediaSearch(sort_by="popularity"))


class TestRankings(MediaTestCase):
    def setUp(self):
        super().setUp()
        self.ratings.set_rating(self.bob.user_id, self.dune.id, 5)
        self.ratings.set_rating(self.bob.user_id, self.arrival.id, 4)
        self.ratings.set_rating(self.bob.user_id, self.notebook.id, 2)

    def test_leaderboard_order(self):
        self.ratings.set_rating(self.alice.user_id, self.dune.id, 5)
        board = self.media_service.get_leaderboard()
        self.assertEqual(self.titles(board), ["Dune", "Arrival", "The Notebook", "Cars"])
        self.assertEqual(board[0].average_rating, 5.0)
        self.assertEqual(board[0].rating_count, 2)
        self.assertEqual(board[-1].rating_count, 0)

    def test_leaderboard_count_breaks_ties(self):
        carol = self.make_user("carol")
        self.ratings.set_rating(self.alice.user_id, self.cars.id, 5)
        self.ratings.set_rating(carol.user_id, self.cars.id, 5)
        board = self.media_service.get_leaderboard(2)
        # both average 5; Cars has two ratings, Dune one
        self.assertEqual(self.titles(board), ["Cars", "Dune"])
        self.assertEqual([entry.rating_count for entry in board], [2, 1])

    def test_limit_is_clamped(self):
        self.assertEqual(len(self.media_service.get_leaderboard(0)), 1)
        self.assertEqual(len(self.media_service.get_leaderboard(-5)), 1)
        self.assertEqual(len(self.media_service.get_leaderboard(1000)), 4)
        self.assertEqual(self.media_service.clamp_limit(None), 10)
        self.assertEqual(self.media_service.clamp_limit(1000), 100)

    def test_content_recommendations_skip_rated(self):
        recs = self.media_service.get_recommendations(self.alice.user_id)
        self.assertEqual(self.titles(recs), ["Dune", "Arrival", "The Notebook", "Cars"])

        self.ratings.set_rating(self.alice.user_id, self.dune.id, 5)
        recs = self.media_service.get_recommendations(self.alice.user_id, rec_type="content")
        self.assertNotIn("Dune", self.titles(recs))

    def test_genre_recommendations_from_liked_media(self):
        self.ratings.set_rating(self.alice.user_id, self.dune.id, 5)
        recs = self.media_service.get_recommendations(self.alice.user_id, rec_type="genre")
        self.assertEqual(self.titles(recs), ["Arrival"])

    def test_genre_recommendations_from_favorite_genre(self):
        carol = self.make_user("carol", favorite_genre="Romance")
        recs = self.media_service.get_recommendations(carol.user_id, rec_type="genre")
        self.assertEqual(self.titles(recs), ["The Notebook"])

    def test_genre_without_signal_falls_back_to_content(self):
        dave = self.make_user("dave")
        genre = self.media_service.get_recommendations(dave.user_id, rec_type="genre")
        content = self.media_service.get_recommendations(dave.user_id, rec_type="content")
        self.assertEqual(self.titles(genre), self.titles(content))

    def test_unknown_recommendation_type(self):
        with self.assertRaises(ValidationError):
            self.media_service.get_recommendations(self.alice.user_id, rec_type="mood")


if __name__ == "__main__":
    unittest.main()
