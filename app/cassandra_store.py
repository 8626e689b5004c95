# app/cassandra_store.py
"""Cassandra-backed ProductStore.

Rows live in a single ``product`` table keyed by ``id``. The session must
use a dict row factory (``connect`` sets it up).
"""
from typing import List, Optional

from cassandra.query import dict_factory

from .config import (
    CASSANDRA_CONTACT_POINTS, CASSANDRA_KEYSPACE, CASSANDRA_PORT,
    CASSANDRA_REPLICATION_FACTOR,
)
from .database import ProductStore
from .logger import get_logger
from .models import Product

logger = get_logger(__name__)

CREATE_KEYSPACE = (
    "CREATE KEYSPACE IF NOT EXISTS {keyspace} "
    "WITH replication = {{'class': 'SimpleStrategy', 'replication_factor': {rf}}}"
)
CREATE_TABLE = (
    "CREATE TABLE IF NOT EXISTS product ("
    "id text PRIMARY KEY, name text, description text, price double, image text, category text)"
)
SELECT_ID = "SELECT id FROM product WHERE id = %s"
SELECT_ONE = "SELECT id, name, description, price, image, category FROM product WHERE id = %s"
SELECT_ALL = "SELECT id, name, description, price, image, category FROM product"
INSERT = (
    "INSERT INTO product (id, name, description, price, image, category) "
    "VALUES (%s, %s, %s, %s, %s, %s)"
)
DELETE = "DELETE FROM product WHERE id = %s"


def connect(contact_points: Optional[List[str]] = None, port: int = CASSANDRA_PORT,
            keyspace: str = CASSANDRA_KEYSPACE, replication_factor: int = CASSANDRA_REPLICATION_FACTOR):
    """Open a session, creating the keyspace and table if they are missing."""
    from cassandra.cluster import Cluster

    cluster = Cluster(contact_points=contact_points or CASSANDRA_CONTACT_POINTS, port=port)
    session = cluster.connect()
    session.execute(CREATE_KEYSPACE.format(keyspace=keyspace, rf=replication_factor))
    session.set_keyspace(keyspace)
    session.execute(CREATE_TABLE)
    session.row_factory = dict_factory
    logger.info("Connected to Cassandra keyspace '{}' at {}:{}", keyspace, cluster.contact_points, port)
    return session


class CassandraProductStore(ProductStore):

    def __init__(self, session):
        self.session = session

    def exists(self, product_id: str) -> bool:
        return self.session.execute(SELECT_ID, (product_id,)).one() is not None

    def get(self, product_id: str) -> Optional[Product]:
        row = self.session.execute(SELECT_ONE, (product_id,)).one()
        return Product(**row) if row is not None else None

    def get_all(self) -> List[Product]:
        return [Product(**row) for row in self.session.execute(SELECT_ALL)]

    def put(self, product: Product) -> Product:
        self.session.execute(INSERT, (
            product.id, product.name, product.description,
            product.price, product.image, product.category,
        ))
        return product

    def delete(self, product: Product) -> None:
        self.session.execute(DELETE, (product.id,))
