import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from products_api.models.product import Product
from products_api.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)

# Ids outside this range cannot be stored, so they can never match a row
MAX_PRODUCT_ID = 2**63 - 1


class ProductService:
    """
    Service class for Product CRUD operations.

    Every method performs a single round-trip to the store, except the
    lookup-then-mutate operations (update, toggle, delete) which first
    fetch the product by id. Methods return None/False when the product
    does not exist and leave the HTTP mapping to the caller.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, product_data: ProductCreate) -> Product:
        """
        Create a new product.

        Args:
            product_data: Product creation data

        Returns:
            Created product instance, with its id and default availability
        """
        product = Product(
            name=product_data.name,
            price=product_data.price,
        )
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        logger.info("Created product %s", product.id)
        return product

    def get_all(self) -> List[Product]:
        """Get every product ordered by id."""
        return self.db.query(Product).order_by(Product.id.asc()).all()

    def get_by_id(self, product_id: Optional[int]) -> Optional[Product]:
        """
        Get a product by ID.

        Args:
            product_id: Product ID to look up; None for ids that could not be converted

        Returns:
            Product instance or None if not found
        """
        if product_id is None or abs(product_id) > MAX_PRODUCT_ID:
            return None
        return self.db.query(Product).filter(Product.id == product_id).first()

    def update(self, product_id: Optional[int], product_data: ProductUpdate) -> Optional[Product]:
        """
        Overwrite name, price and availability of an existing product.

        Args:
            product_id: ID of product to update
            product_data: The new values for every mutable field

        Returns:
            Updated product or None if not found
        """
        product = self.get_by_id(product_id)

        if not product:
            return None

        for field, value in product_data.model_dump().items():
            setattr(product, field, value)

        self.db.commit()
        self.db.refresh(product)
        logger.info("Updated product %s", product_id)
        return product

    def toggle_availability(self, product_id: Optional[int]) -> Optional[Product]:
        """
        Invert the availability of a product, leaving every other field alone.

        Returns:
            Updated product or None if not found
        """
        product = self.get_by_id(product_id)

        if not product:
            return None

        product.availability = not product.availability
        self.db.commit()
        self.db.refresh(product)
        logger.info("Product %s availability set to %s", product_id, product.availability)
        return product

    def delete(self, product_id: Optional[int]) -> bool:
        """
        Delete a product.

        Args:
            product_id: ID of product to delete

        Returns:
            True if deleted, False if not found
        """
        product = self.get_by_id(product_id)

        if not product:
            return False

        self.db.delete(product)
        self.db.commit()
        logger.info("Deleted product %s", product_id)
        return True
