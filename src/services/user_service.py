"""User service — CRUD operations over the user store.

Each operation validates its input, talks to the repository, and raises
a DomainError subclass on failure. Mapping those errors to HTTP responses
is the API layer's job.
"""

import logging

from domain.model.errors import NotFoundError, ValidationError
from domain.model.user import User
from domain.model.validation import validate_email_format, validate_required_fields
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"
UPDATE_CONFIRMATION = "User updated successfully"

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


def list_users(
    repo: UserRepository,
    page: int = DEFAULT_PAGE,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> list[User]:
    """Return one page of users in store order.

    Pages are 1-based. A page or page size below 1 yields an empty list
    instead of wrapping around or raising.
    """
    if page < 1 or page_size < 1:
        return []
    return repo.list(offset=(page - 1) * page_size, limit=page_size)


def get_user(repo: UserRepository, user_id: int) -> User:
    user = repo.get_by_id(user_id)
    if user is None:
        raise NotFoundError(USER_NOT_FOUND)
    return user


def create_user(repo: UserRepository, name: str | None, email: str | None) -> User:
    """Validate and store a new user. The store assigns the id.

    Raises:
        ValidationError: name/email missing or email malformed
    """
    _require(validate_required_fields(name, email))
    _require(validate_email_format(email))

    user = repo.insert(name=name, email=email)
    logger.info("User created", extra={"user_id": user.id})
    return user


def update_user(repo: UserRepository, user_id: int, name: str | None, email: str | None) -> str:
    """Replace name and email of an existing user.

    The email format check runs against the email currently stored for
    the user, not the replacement value: a malformed replacement email is
    accepted as long as the stored one is well-formed.

    Returns:
        Confirmation message

    Raises:
        NotFoundError: no user with this id
        ValidationError: name/email missing, or stored email malformed
    """
    existing = get_user(repo, user_id)

    _require(validate_required_fields(name, email))
    _require(validate_email_format(existing.email))

    if repo.update(user_id, name=name, email=email) is None:
        # Removed between the lookup and the write.
        raise NotFoundError(USER_NOT_FOUND)

    logger.info("User updated", extra={"user_id": user_id})
    return UPDATE_CONFIRMATION


def delete_user(repo: UserRepository, user_id: int) -> User:
    removed = repo.remove(user_id)
    if removed is None:
        raise NotFoundError(USER_NOT_FOUND)
    logger.info("User deleted", extra={"user_id": user_id})
    return removed


def _require(result: tuple[bool, str]) -> None:
    is_valid, error_msg = result
    if not is_valid:
        raise ValidationError(error_msg)
