from dataclasses import dataclass


@dataclass
class User:
    """Domain model representing a user record held by the store."""
    id: int
    name: str
    email: str

    def rename(self, name: str, email: str) -> None:
        """Overwrite the mutable fields. The id never changes."""
        self.name = name
        self.email = email


def seed_users() -> list[User]:
    """Records the store starts with on every process start."""
    return [
        User(id=1, name="Alice", email="alice@example.com"),
        User(id=2, name="Bob", email="bob@example.com"),
    ]
