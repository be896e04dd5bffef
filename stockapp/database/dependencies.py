from fastapi import Depends
from sqlalchemy.orm import Session

from stockapp.database.database import get_db
from stockapp.services.product import ProductService


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)
