# app/database.py
"""Storage for products.

The service only talks to ``ProductStore``; concrete backends live here
(in-memory) and in ``cassandra_store`` (Cassandra).
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from .config import STORAGE_BACKEND
from .logger import get_logger
from .models import Product

logger = get_logger(__name__)


class ProductStore(ABC):

    @abstractmethod
    def exists(self, product_id: str) -> bool:
        """Return True if a product with this id is stored."""

    @abstractmethod
    def get(self, product_id: str) -> Optional[Product]:
        """Return the stored product, or None."""

    @abstractmethod
    def get_all(self) -> List[Product]:
        """Return every stored product in the backend's enumeration order."""

    @abstractmethod
    def put(self, product: Product) -> Product:
        """Insert or overwrite the product keyed by its id."""

    @abstractmethod
    def delete(self, product: Product) -> None:
        """Remove the product keyed by its id."""


class InMemoryProductStore(ProductStore):
    """Dict-backed store; enumerates in insertion order."""

    def __init__(self, products: Optional[List[Product]] = None):
        self._products: Dict[str, Product] = {}
        for p in products or []:
            self._products[p.id] = p.model_copy()

    def exists(self, product_id: str) -> bool:
        return product_id in self._products

    def get(self, product_id: str) -> Optional[Product]:
        p = self._products.get(product_id)
        # hand out copies so callers can't mutate stored state without put()
        return p.model_copy() if p is not None else None

    def get_all(self) -> List[Product]:
        return [p.model_copy() for p in self._products.values()]

    def put(self, product: Product) -> Product:
        self._products[product.id] = product.model_copy()
        return product

    def delete(self, product: Product) -> None:
        self._products.pop(product.id, None)

    def clear(self):
        self._products.clear()


def build_store(backend: str = STORAGE_BACKEND) -> ProductStore:
    if backend == "memory":
        logger.info("Using in-memory product store")
        return InMemoryProductStore()
    if backend == "cassandra":
        from .cassandra_store import CassandraProductStore, connect

        session = connect()
        logger.info("Using Cassandra product store")
        return CassandraProductStore(session)
    raise ValueError(f"Unknown STORAGE_BACKEND '{backend}' (expected 'memory' or 'cassandra')")
