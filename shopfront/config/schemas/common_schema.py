"""Shipping, catalog and customer directory configuration schemas."""
from typing import Dict, List

from pydantic import BaseModel, Field, field_validator

from shopfront.domain.product.value_objects import Product


class ShippingConfig(BaseModel):
    """Shipping fee configuration."""

    flat_rate: float = Field(5.0, ge=0, description="Flat shipping fee per order")


class CatalogConfig(BaseModel):
    """Product catalog configuration."""

    products: List[Product] = Field(default_factory=list)

    @field_validator("products")
    @classmethod
    def validate_unique_ids(cls, v: List[Product]) -> List[Product]:
        seen = set()
        for product in v:
            if product.product_id in seen:
                raise ValueError(f"Duplicate product id: {product.product_id}")
            seen.add(product.product_id)
        return v


class CustomerDirectoryConfig(BaseModel):
    """Association of customer identifiers with postal codes."""

    postal_codes: Dict[int, str] = Field(default_factory=dict)
