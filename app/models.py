# app/models.py
from pydantic import BaseModel, Field
from typing import Optional


class Product(BaseModel):
    id: str
    name: str
    description: str
    price: float
    image: str
    category: str


# Create payload: fields are checked by the service so a missing one
# yields a 400 with a readable message rather than a schema error.
class ProductIn(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, allow_inf_nan=False)
    image: Optional[str] = None
    category: Optional[str] = None


# Update payload: None means "leave the stored value unchanged".
class ProductUpdate(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, allow_inf_nan=False)
    image: Optional[str] = None
    category: Optional[str] = None


class ErrorResponse(BaseModel):
    statusCode: int
    message: str
