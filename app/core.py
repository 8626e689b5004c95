# app/core.py
import math
from typing import List

from .database import ProductStore
from .exceptions import ConflictError, NotFoundError, ValidationError
from .logger import get_logger
from .models import Product, ProductIn, ProductUpdate

logger = get_logger(__name__)

ALL_FIELDS_REQUIRED = (
    "All fields are required. Please provide values for id, name, description, price, image, and category."
)
PRICE_NOT_POSITIVE = "Price must be greater than 0"

# Fields an update may overwrite; id is never among them.
UPDATABLE_FIELDS = ("name", "description", "price", "image", "category")


def _valid_price(price: float) -> bool:
    # rejects NaN and infinities as well as non-positive values
    return math.isfinite(price) and price > 0


def _check_price(price: float):
    if not _valid_price(price):
        raise ValidationError(PRICE_NOT_POSITIVE)


class ProductService:
    """Validates product requests and delegates persistence to a ProductStore."""

    def __init__(self, store: ProductStore):
        self.store = store

    def create(self, payload: ProductIn) -> Product:
        required = (payload.name, payload.description, payload.image, payload.category)
        if not payload.id or any(v is None for v in required) or payload.price is None or not _valid_price(payload.price):
            logger.warning("Rejected create for id={!r}: missing fields or bad price", payload.id)
            raise ValidationError(ALL_FIELDS_REQUIRED)

        if self.store.exists(payload.id):
            logger.warning("Rejected create: product {} already exists", payload.id)
            raise ConflictError(f"Product with ID {payload.id} already exists")

        _check_price(payload.price)

        product = self.store.put(Product(**payload.model_dump()))
        logger.info("Created product {}", product.id)
        return product

    def get_by_id(self, product_id: str) -> Product:
        product = self.store.get(product_id)
        if product is None:
            logger.warning("Rejected get: product {} not found", product_id)
            raise NotFoundError(f"Product not found with id {product_id}")
        return product

    def list_all(self) -> List[Product]:
        return self.store.get_all()

    def update(self, product_id: str, payload: ProductUpdate) -> Product:
        product = self.store.get(product_id)
        if product is None:
            logger.warning("Rejected update: product {} not found", product_id)
            raise NotFoundError(f"Product not found with id {product_id}")

        payload = payload.model_copy(update={"id": product_id})

        if payload.price is not None:
            try:
                _check_price(payload.price)
            except ValidationError:
                logger.warning("Rejected update of {}: price {} not positive", product_id, payload.price)
                raise

        changes = {f: getattr(payload, f) for f in UPDATABLE_FIELDS if getattr(payload, f) is not None}
        merged = self.store.put(product.model_copy(update=changes))
        logger.info("Updated product {} ({})", product_id, ", ".join(changes) or "no changes")
        return merged

    def delete(self, product_id: str) -> None:
        product = self.store.get(product_id)
        if product is None:
            logger.warning("Rejected delete: product {} not found", product_id)
            raise NotFoundError(f"Product not found with id {product_id}")
        self.store.delete(product)
        logger.info("Deleted product {}", product_id)
