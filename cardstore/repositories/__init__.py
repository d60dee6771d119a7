"""Repository layer - data access abstraction.

Repositories handle all database queries, providing a clean interface
for callers. Callers should use repositories for data access rather
than issuing SQL against the cards table directly.

Dependency direction: Callers -> Repositories -> Database
"""

from cardstore.exceptions import BindError, NotFoundError, RepositoryError

from .card_repository import CardRepository, CardStore

__all__ = [
    "BindError",
    "CardRepository",
    "CardStore",
    "NotFoundError",
    "RepositoryError",
]
