"""Unit tests for user_service module."""

import unittest
from unittest.mock import MagicMock

from adapter.memory.user_repository import InMemoryUserRepository
from domain.model.errors import DomainError, NotFoundError, ValidationError
from domain.model.user import User, seed_users
from services.user_service import (
    UPDATE_CONFIRMATION,
    create_user,
    delete_user,
    get_user,
    list_users,
    update_user,
)


class TestListUsers(unittest.TestCase):

    def setUp(self):
        self.repo = InMemoryUserRepository(seed_users())
        for i in range(13):
            self.repo.insert(name=f"User{i}", email=f"user{i}@example.com")

    def test_defaults_return_first_ten(self):
        users = list_users(self.repo)
        self.assertEqual([u.id for u in users], list(range(1, 11)))

    def test_second_page(self):
        users = list_users(self.repo, page=2, page_size=10)
        self.assertEqual([u.id for u in users], [11, 12, 13, 14, 15])

    def test_page_past_end_is_empty(self):
        self.assertEqual(list_users(self.repo, page=5, page_size=10), [])

    def test_non_positive_page_or_size_is_empty(self):
        """page <= 0 and pageSize <= 0 are clamped to an empty result."""
        self.assertEqual(list_users(self.repo, page=0), [])
        self.assertEqual(list_users(self.repo, page=-3), [])
        self.assertEqual(list_users(self.repo, page=1, page_size=0), [])

    def test_converts_page_to_offset(self):
        repo = MagicMock()
        repo.list.return_value = []

        list_users(repo, page=3, page_size=4)

        repo.list.assert_called_once_with(offset=8, limit=4)


class TestGetUser(unittest.TestCase):

    def setUp(self):
        self.repo = InMemoryUserRepository(seed_users())

    def test_returns_user(self):
        self.assertEqual(get_user(self.repo, 1).name, "Alice")

    def test_missing_raises_not_found(self):
        with self.assertRaises(NotFoundError) as ctx:
            get_user(self.repo, 42)
        self.assertEqual(str(ctx.exception), "User not found")


class TestCreateUser(unittest.TestCase):

    def setUp(self):
        self.repo = InMemoryUserRepository(seed_users())

    def test_creates_with_next_id(self):
        user = create_user(self.repo, name="Charlie", email="charlie@example.com")

        self.assertEqual(user, User(id=3, name="Charlie", email="charlie@example.com"))
        self.assertEqual(self.repo.get_by_id(3), user)

    def test_missing_name_raises_without_mutation(self):
        with self.assertRaises(ValidationError) as ctx:
            create_user(self.repo, name="", email="charlie@example.com")

        self.assertEqual(str(ctx.exception), "Name and Email are required")
        self.assertEqual(self.repo.count(), 2)

    def test_missing_email_raises(self):
        with self.assertRaises(ValidationError):
            create_user(self.repo, name="Charlie", email=None)

    def test_malformed_email_raises_without_mutation(self):
        with self.assertRaises(ValidationError) as ctx:
            create_user(self.repo, name="Charlie", email="charlie-at-example")

        self.assertEqual(str(ctx.exception), "Invalid email format")
        self.assertEqual(self.repo.count(), 2)

    def test_validation_error_is_domain_error(self):
        with self.assertRaises(DomainError):
            create_user(self.repo, name=None, email=None)


class TestUpdateUser(unittest.TestCase):

    def setUp(self):
        self.repo = InMemoryUserRepository(seed_users())

    def test_updates_name_and_email_keeping_id(self):
        message = update_user(self.repo, 2, name="Robert", email="robert@example.com")

        self.assertEqual(message, UPDATE_CONFIRMATION)
        self.assertEqual(self.repo.get_by_id(2), User(id=2, name="Robert", email="robert@example.com"))

    def test_missing_user_raises_not_found(self):
        with self.assertRaises(NotFoundError):
            update_user(self.repo, 99, name="X", email="x@example.com")

    def test_not_found_takes_precedence_over_validation(self):
        with self.assertRaises(NotFoundError):
            update_user(self.repo, 99, name="", email="")

    def test_missing_fields_raise_without_mutation(self):
        with self.assertRaises(ValidationError):
            update_user(self.repo, 1, name="Alicia", email="")
        self.assertEqual(self.repo.get_by_id(1).name, "Alice")

    def test_format_check_uses_stored_email_not_incoming(self):
        """The format rule is applied to the stored email: a malformed replacement is accepted."""
        update_user(self.repo, 1, name="Alice", email="not-an-email")
        self.assertEqual(self.repo.get_by_id(1).email, "not-an-email")

    def test_malformed_stored_email_rejects_valid_update(self):
        repo = InMemoryUserRepository([User(id=1, name="Eve", email="eve-at-example")])

        with self.assertRaises(ValidationError) as ctx:
            update_user(repo, 1, name="Eve", email="eve@example.com")

        self.assertEqual(str(ctx.exception), "Invalid email format")
        self.assertEqual(repo.get_by_id(1).email, "eve-at-example")


class TestDeleteUser(unittest.TestCase):

    def setUp(self):
        self.repo = InMemoryUserRepository(seed_users())

    def test_returns_removed_user(self):
        removed = delete_user(self.repo, 1)

        self.assertEqual(removed.name, "Alice")
        self.assertIsNone(self.repo.get_by_id(1))

    def test_second_delete_raises_not_found(self):
        delete_user(self.repo, 1)
        with self.assertRaises(NotFoundError):
            delete_user(self.repo, 1)
