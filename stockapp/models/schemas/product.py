# models/schemas/product.py
from pydantic import BaseModel, Field
from typing import Optional

from .base import ORMModel


class ProductBase(BaseModel):
    name: Optional[str] = None
    barcode: str
    quantity: int = Field(0, ge=-2**31, le=2**31 - 1)


class ProductCreate(ProductBase):
    pass


class ProductUpdate(ProductBase):
    """Full replacement of a product's fields, partial updates are not supported."""
    pass


class Product(ProductBase, ORMModel):
    id: int
