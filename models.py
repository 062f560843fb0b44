"""
Pydantic schemas for the storefront products.json response.

Only the fields the export needs are declared; anything else in the payload is ignored.
Declared fields are strict: ids and positions must be JSON integers, text fields must
be JSON strings, and text must be valid Unicode (no lone surrogates).

Usage:
    try:
        page = PageResponse.model_validate(response.json())
    except ValidationError as e:
        ...
"""
from pydantic import BaseModel, Field, StrictInt, StrictStr, field_validator


def _reject_surrogates(v):
    if v is not None:
        try:
            v.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ValueError(f"not valid unicode text: {e.reason}") from e
    return v


class Variant(BaseModel):
    id: StrictInt
    title: StrictStr
    price: StrictStr = Field(..., description="Decimal as text, original formatting kept")
    sku: StrictStr
    barcode: StrictStr | None = None
    grams: StrictInt | None = None

    @field_validator("title", "price", "sku", "barcode")
    @classmethod
    def validate_text(cls, v):
        return _reject_surrogates(v)


class Image(BaseModel):
    position: StrictInt
    src: StrictStr

    @field_validator("src")
    @classmethod
    def validate_src(cls, v):
        return _reject_surrogates(v)


class Product(BaseModel):
    handle: StrictStr
    title: StrictStr
    vendor: StrictStr
    product_type: StrictStr
    variants: list[Variant]
    images: list[Image]

    @field_validator("handle", "title", "vendor", "product_type")
    @classmethod
    def validate_text(cls, v):
        return _reject_surrogates(v)


class PageResponse(BaseModel):
    """One page of products. An empty page means the catalog is exhausted."""
    products: list[Product]

    def is_empty(self) -> bool:
        return not self.products

    def __len__(self) -> int:
        return len(self.products)
