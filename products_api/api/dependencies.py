"""Request validation dependencies for the products routes."""
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Path, Request

from products_api.schemas.product import ProductCreate, ProductUpdate
from products_api.validation import check_errors, run_rules
from products_api.validation.product_rules import (
    CREATE_PRODUCT_RULES,
    ID_RULES,
    UPDATE_PRODUCT_RULES,
)
from products_api.validation.rules import to_bool, to_int, to_text


@dataclass
class ProductUpdateRequest:
    product_id: Optional[int]
    product_data: ProductUpdate


async def read_body(request: Request) -> dict:
    """
    Return the JSON body as a dict.

    Missing, malformed or non-object bodies read as `{}` so that the field
    rules report them like any other empty payload.
    """
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def validated_product_id(
    product_id: str = Path(..., description="The ID of the product", examples=["1"]),
) -> Optional[int]:
    check_errors(run_rules(ID_RULES, path={"id": product_id}))
    # Ids too long to convert cannot exist in the store
    return to_int(product_id)


def validated_product_create(body: dict = Depends(read_body)) -> ProductCreate:
    check_errors(run_rules(CREATE_PRODUCT_RULES, body=body))
    return ProductCreate(
        name=to_text(body["name"]),
        price=float(to_text(body["price"])),
    )


def validated_product_update(
    product_id: str = Path(..., description="The ID of the product", examples=["1"]),
    body: dict = Depends(read_body),
) -> ProductUpdateRequest:
    # Path and body rules are reported together
    check_errors(run_rules(UPDATE_PRODUCT_RULES, path={"id": product_id}, body=body))
    return ProductUpdateRequest(
        product_id=to_int(product_id),
        product_data=ProductUpdate(
            name=to_text(body["name"]),
            price=float(to_text(body["price"])),
            availability=to_bool(body["availability"]),
        ),
    )
