from fastapi import APIRouter, Depends, HTTPException, Path, status

from product_api.api.dependencies import get_product_service
from product_api.domain.exceptions import (
    ConcurrentModification,
    NotFound,
    OperationFailed,
    ValidationError,
)
from product_api.services.product_service import ProductService
from product_api.schemas.product import (
    MessageResponse,
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductListResponse
)

router = APIRouter(prefix="/products", tags=["Products"])


@router.post(
    "/",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
    description="Create a new product with name, description, price, and initial stock."
)
def create_product(
    product_data: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    """
    Create a new product.

    - **name**: Product name, non-blank, at most 255 characters (required)
    - **description**: Product description, may be empty (required)
    - **price**: Product price, must be non-negative (required)
    - **stock**: Initial stock quantity, must be a non-negative integer (required)
    """
    try:
        return service.create_product(
            product_data.name,
            product_data.description,
            product_data.price,
            product_data.stock
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )


@router.get(
    "/",
    response_model=ProductListResponse,
    summary="List all products",
    description="Get every product, newest first."
)
def list_products(
    service: ProductService = Depends(get_product_service)
):
    """Get all products ordered by creation time, newest first."""
    products = service.get_all_products()

    return ProductListResponse(
        items=[ProductResponse.model_validate(p) for p in products],
        count=len(products)
    )


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Get product by ID",
    description="Get detailed information about a specific product."
)
def get_product(
    product_id: int = Path(..., gt=0, description="Product ID"),
    service: ProductService = Depends(get_product_service)
):
    """Get a product by ID."""
    try:
        return service.get_product_by_id(product_id)
    except NotFound as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )


@router.api_route(
    "/{product_id}",
    methods=["PUT", "PATCH"],
    response_model=ProductResponse,
    summary="Update a product",
    description="Update product details. Only provided fields will be updated."
)
def update_product(
    product_data: ProductUpdate,
    product_id: int = Path(..., gt=0, description="Product ID"),
    service: ProductService = Depends(get_product_service)
):
    """
    Update a product.

    Partial updates are supported - only include fields you want to change.
    Fields left out of the request body keep their current values.
    """
    try:
        return service.update_product(
            product_id,
            **product_data.model_dump(exclude_unset=True)
        )
    except NotFound as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except ConcurrentModification as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    summary="Delete a product",
    description="Delete a product by ID."
)
def delete_product(
    product_id: int = Path(..., gt=0, description="Product ID"),
    service: ProductService = Depends(get_product_service)
):
    """Delete a product."""
    try:
        service.delete_product(product_id)
    except NotFound as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except OperationFailed as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    return MessageResponse(message=f"Product with ID {product_id} deleted successfully")
