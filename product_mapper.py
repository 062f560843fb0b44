"""
Map products.json products to flat CSV rows.
"""
from typing import Iterator
from models import Image, PageResponse, Product, Variant


CSV_FIELDNAMES = [
    "product_handle",
    "product_title",
    "vendor",
    "product_type",
    "variant_id",
    "variant_title",
    "variant_price",
    "variant_sku",
    "variant_barcode",
    "variant_grams",
    "image_position",
    "image_src",
]


def _text(value) -> str:
    return "" if value is None else str(value)


def build_row(product: Product, variant: Variant | None, image: Image | None) -> list[str]:
    """One flat row: product fields plus at most one variant and one image."""
    return [
        product.handle,
        product.title,
        product.vendor,
        product.product_type,
        _text(variant.id) if variant else "",
        variant.title if variant else "",
        variant.price if variant else "",
        variant.sku if variant else "",
        _text(variant.barcode) if variant else "",
        _text(variant.grams) if variant else "",
        _text(image.position) if image else "",
        image.src if image else "",
    ]


def product_to_rows(product: Product) -> list[list[str]]:
    """
    Pair variants and images by list index, not by any key: row i gets variants[i]
    and images[i], with blanks once the shorter list runs out. A product with
    neither variants nor images yields no rows.
    """
    rows = []
    for i in range(max(len(product.variants), len(product.images))):
        variant = product.variants[i] if i < len(product.variants) else None
        image = product.images[i] if i < len(product.images) else None
        rows.append(build_row(product, variant, image))
    return rows


def page_to_rows(page: PageResponse) -> Iterator[list[str]]:
    for product in page.products:
        yield from product_to_rows(product)
