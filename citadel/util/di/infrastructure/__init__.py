"""Infrastructure providers.

Implementations are imported here so ``__subclasses__()`` can find them.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
