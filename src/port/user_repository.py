from typing import Protocol
from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access."""
    def list(self, offset: int, limit: int) -> list[User]:
        """Return at most `limit` users in store order, skipping the first `offset`."""
        ...

    def count(self) -> int:
        """Return the number of stored users."""
        ...

    def get_by_id(self, user_id: int) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    def insert(self, name: str, email: str) -> User:
        """Assign the next ID, store the user and return it."""
        ...

    def update(self, user_id: int, name: str, email: str) -> User | None:
        """Overwrite name and email. Return the updated User or None if not found."""
        ...

    def remove(self, user_id: int) -> User | None:
        """Delete a user. Return the removed User or None if not found."""
        ...
