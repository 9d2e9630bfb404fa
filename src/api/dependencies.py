from adapter.memory.user_repository import InMemoryUserRepository
from domain.model.user import seed_users
from port.user_repository import UserRepository

# Process-lifetime store, seeded once at import.
_user_repo = InMemoryUserRepository(seed_users())


def get_user_repo() -> UserRepository:
    return _user_repo
