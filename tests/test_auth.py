# tests/test_auth.py

import unittest
from datetime import timedelta
from unittest import mock
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError
from mediarating.core.auth import get_password_hash, owns, strip_bearer, verify_password
from mediarating.core.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidCredentialsError,
    UnauthorizedError,
    ValidationError,
)
from mediarating.models.user import UserModel
from mediarating.services.auth_service import AuthService
from mediarating.services.token_service import SqlTokenStore
from mediarating.services.user_service import UserService
from tests.base import DatabaseTestCase


class TestPasswordHash(unittest.TestCase):
    def test_same_input_same_digest(self):
        self.assertEqual(get_password_hash("secret1"), get_password_hash("secret1"))

    def test_digest_is_64_hex_chars(self):
        for password in ["", "a", "secret1", "ü" * 300]:
            digest = get_password_hash(password)
            self.assertEqual(len(digest), 64)
            self.assertTrue(all(c in "0123456789abcdef" for c in digest))

    def test_no_collisions_in_corpus(self):
        corpus = ["secret1", "secret2", "Secret1", "secret1 ", "", "alice", "bob", "pässwört", "1234"]
        digests = {get_password_hash(p) for p in corpus}
        self.assertEqual(len(digests), len(corpus))

    def test_digest_matches_sha256(self):
        self.assertEqual(
            get_password_hash("abc"), "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_verify_password(self):
        stored = get_password_hash("secret1")
        self.assertTrue(verify_password("secret1", stored))
        self.assertFalse(verify_password("secret2", stored))
        self.assertFalse(verify_password("secret1", None))
        self.assertFalse(verify_password("secret1", ""))


class TestAuthHelpers(unittest.TestCase):
    def test_strip_bearer(self):
        self.assertEqual(strip_bearer("Bearer abc"), "abc")
        self.assertEqual(strip_bearer("abc"), "abc")
        self.assertIsNone(strip_bearer("Bearer "))
        self.assertEqual(strip_bearer("Bearer  bob-abc-mrpToken"), " bob-abc-mrpToken")
        self.assertEqual(strip_bearer("   "), "   ")
        self.assertIsNone(strip_bearer(None))

    def test_owns(self):
        self.assertTrue(owns(3, 3))
        self.assertFalse(owns(3, 4))
        self.assertFalse(owns(3, None))


class TestSqlTokenStore(DatabaseTestCase):
    def setUp(self):
        super().setUp()
        self.user = self.make_user()
        self.store = SqlTokenStore(self.db)

    def test_issued_token_verifies_to_owner(self):
        token = self.store.issue(self.user.user_id, self.user.username)
        self.assertTrue(token.startswith("alice-"))
        self.assertTrue(token.endswith("-mrpToken"))
        self.assertEqual(self.store.verify(token), self.user.user_id)
        self.assertEqual(self.store.verify(f"Bearer {token}"), self.user.user_id)

    def test_tokens_are_unique(self):
        first = self.store.issue(self.user.user_id, self.user.username)
        second = self.store.issue(self.user.user_id, self.user.username)
        self.assertNotEqual(first, second)

    def test_expired_token_is_rejected(self):
        expired_store = SqlTokenStore(self.db, ttl=timedelta(seconds=-1))
        token = expired_store.issue(self.user.user_id, self.user.username)
        self.assertIsNone(self.store.verify(token))

    def test_unknown_or_blank_token(self):
        self.assertIsNone(self.store.verify("nope"))
        self.assertIsNone(self.store.verify(""))
        self.assertIsNone(self.store.verify(None))
        self.assertIsNone(self.store.verify("Bearer "))

    def test_revoke(self):
        token = self.store.issue(self.user.user_id, self.user.username)
        self.assertTrue(self.store.revoke(token))
        self.assertIsNone(self.store.verify(token))
        self.assertFalse(self.store.revoke(token))

    def test_verify_swallows_database_errors(self):
        broken_db = mock.Mock()
        broken_db.execute.side_effect = OperationalError("SELECT", {}, Exception("db down"))
        store = SqlTokenStore(broken_db, ttl=timedelta(days=1))
        self.assertIsNone(store.verify("alice-abc-mrpToken"))
        broken_db.rollback.assert_called_once()

    def test_verify_swallows_any_lookup_error(self):
        broken_db = mock.Mock()
        broken_db.execute.side_effect = RuntimeError("connection reset")
        store = SqlTokenStore(broken_db, ttl=timedelta(days=1))
        self.assertIsNone(store.verify("alice-abc-mrpToken"))

    def test_token_for_padded_username_verifies(self):
        user = self.make_user(" bob ")
        token = self.store.issue(user.user_id, user.username)
        self.assertTrue(token.startswith(" bob -"))
        self.assertEqual(self.store.verify(f"Bearer {token}"), user.user_id)


class TestAuthService(DatabaseTestCase):
    def setUp(self):
        super().setUp()
        self.auth = AuthService(UserService(self.db), SqlTokenStore(self.db))

    def count_users(self, username):
        return self.db.execute(
            select(func.count()).select_from(UserModel).where(UserModel.username == username)
        ).scalar_one()

    def test_register_twice_conflicts_once(self):
        user = self.auth.register("alice", "secret1")
        self.assertEqual(user.username, "alice")
        with self.assertRaises(ConflictError):
            self.auth.register("alice", "other-password")
        self.assertEqual(self.count_users("alice"), 1)

    def test_create_user_twice_conflicts(self):
        users = UserService(self.db)
        users.create_user("alice", get_password_hash("secret1"))
        with self.assertRaises(ConflictError):
            users.create_user("alice", get_password_hash("secret2"))
        self.assertEqual(self.count_users("alice"), 1)

    def test_register_stores_hash_not_password(self):
        user = self.auth.register("alice", "secret1")
        stored = UserService(self.db).get_user_model(user.user_id)
        self.assertEqual(stored.password_hash, get_password_hash("secret1"))

    def test_register_validation(self):
        with self.assertRaises(ValidationError):
            self.auth.register("   ", "secret1")
        with self.assertRaises(ValidationError):
            self.auth.register(None, "secret1")
        with self.assertRaises(ValidationError):
            self.auth.register("alice", "abc")
        self.assertEqual(self.count_users("alice"), 0)

    def test_login_token_verifies_to_same_user(self):
        user = self.auth.register("alice", "secret1")
        token = self.auth.login("alice", "secret1")
        self.assertEqual(self.auth.authorize(f"Bearer {token}"), user.user_id)

    def test_username_with_surrounding_spaces_can_authorize(self):
        user = self.auth.register(" bob", "secret1")
        token = self.auth.login(" bob", "secret1")
        self.assertEqual(self.auth.authorize(f"Bearer {token}"), user.user_id)

    def test_any_wrong_character_is_rejected(self):
        self.auth.register("alice", "secret1")
        password = "secret1"
        for i in range(len(password)):
            wrong = password[:i] + ("X" if password[i] != "X" else "Y") + password[i + 1:]
            with self.assertRaises(InvalidCredentialsError):
                self.auth.login("alice", wrong)

    def test_unknown_user_is_invalid_credentials(self):
        with self.assertRaises(InvalidCredentialsError):
            self.auth.login("nobody", "secret1")

    def test_missing_or_malformed_header_is_unauthorized(self):
        for header in [None, "", "Token abc", "bearer abc"]:
            with self.assertRaises(UnauthorizedError):
                self.auth.authorize(header)

    def test_unverifiable_token_is_forbidden(self):
        with self.assertRaises(ForbiddenError):
            self.auth.authorize("Bearer alice-0000-mrpToken")

    def test_invalid_credentials_is_an_unauthorized_error(self):
        self.assertTrue(issubclass(InvalidCredentialsError, UnauthorizedError))
        self.assertEqual(InvalidCredentialsError().status_code, 401)

    def test_logout_revokes_token(self):
        self.auth.register("alice", "secret1")
        header = f"Bearer {self.auth.login('alice', 'secret1')}"
        self.auth.logout(header)
        with self.assertRaises(ForbiddenError):
            self.auth.authorize(header)


if __name__ == "__main__":
    unittest.main()
