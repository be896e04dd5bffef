# services/product.py
from typing import Optional, List
from stockapp.models.database_models import Product
from stockapp.models.schemas.product import ProductCreate, ProductUpdate
from stockapp.services.exceptions import BarcodeConflictError, ProductNotFoundError
from stockapp.utils.logging import get_logger

from stockapp.services.base import BaseService

logger = get_logger(__name__)


class ProductService(BaseService[Product]):
    async def list_all(self) -> List[Product]:
        return self.db.query(Product).order_by(Product.id).all()

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        return self.db.get(Product, product_id)

    async def get(self, product_id: int) -> Product:
        """Get a product by id, raising if it does not exist."""
        product = await self.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def create(self, data: ProductCreate) -> Product:
        """Create a product, the id is assigned by the database."""
        product = Product(
            name=data.name,
            barcode=data.barcode,
            quantity=data.quantity,
        )

        await self._handle_db_operation(
            lambda: self.db.add(product) or product,
            on_conflict=lambda: BarcodeConflictError(data.barcode),
        )
        self.db.refresh(product)
        logger.info("Created product {} with barcode {}", product.id, product.barcode)
        return product

    async def update(self, product_id: int, data: ProductUpdate) -> Product:
        """Overwrite name, barcode and quantity of an existing product."""
        product = await self.get(product_id)

        for field, value in data.model_dump().items():
            setattr(product, field, value)

        await self._handle_db_operation(
            lambda: product,
            on_conflict=lambda: BarcodeConflictError(data.barcode),
        )
        self.db.refresh(product)
        logger.info("Updated product {}", product.id)
        return product

    async def delete(self, product_id: int) -> bool:
        """Delete a product. Missing ids are not an error, returns whether a row was removed."""
        product = await self.get_by_id(product_id)
        if product is None:
            logger.debug("Product {} already absent, nothing to delete", product_id)
            return False

        await self._handle_db_operation(lambda: self.db.delete(product) or True)
        logger.info("Deleted product {}", product_id)
        return True
