# routes/product.py
from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from typing import Annotated, List
from stockapp.database.dependencies import get_product_service
from stockapp.services.exceptions import (
    ConstraintViolationError,
    ProductNotFoundError,
    ServiceError,
)
from stockapp.services.product import ProductService
from stockapp.models.schemas.product import (
    Product,
    ProductCreate,
    ProductUpdate,
)

router = APIRouter(prefix="/products", tags=["products"])

# largest id a BIGINT column holds
ProductId = Annotated[int, Path(le=2**63 - 1)]


def _http_error(error: ServiceError) -> HTTPException:
    if isinstance(error, ProductNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, ConstraintViolationError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))


@router.get("", response_model=List[Product])
async def list_products(service: ProductService = Depends(get_product_service)):
    """List all products."""
    products = await service.list_all()
    return [Product.model_validate(product) for product in products]


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: ProductId,
    service: ProductService = Depends(get_product_service)
):
    """Get a specific product by ID."""
    try:
        product = await service.get(product_id)
    except ServiceError as e:
        raise _http_error(e) from e

    return Product.model_validate(product)


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
async def create_product(
    data: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    """Create a new product."""
    try:
        product = await service.create(data)
    except ServiceError as e:
        raise _http_error(e) from e

    return Product.model_validate(product)


@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: ProductId,
    data: ProductUpdate,
    service: ProductService = Depends(get_product_service)
):
    """Replace an existing product's fields."""
    try:
        product = await service.update(product_id, data)
    except ServiceError as e:
        raise _http_error(e) from e

    return Product.model_validate(product)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_product(
    product_id: ProductId,
    service: ProductService = Depends(get_product_service)
):
    """Delete a product. Deleting a missing product also succeeds."""
    try:
        await service.delete(product_id)
    except ServiceError as e:
        raise _http_error(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
