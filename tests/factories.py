"""Builders for products.json payloads used across tests."""

from models import PageResponse


def product_dict(handle="tee", variants=(), images=(), **overrides):
    data = {
        "id": 111,
        "handle": handle,
        "title": handle.replace("-", " ").title(),
        "vendor": "Acme",
        "product_type": "Shirts",
        "tags": ["ignored"],
        "variants": list(variants),
        "images": list(images),
    }
    data.update(overrides)
    return data


def variant_dict(id=1, **overrides):
    data = {
        "id": id,
        "title": f"Size {id}",
        "price": "19.90",
        "sku": f"SKU-{id}",
        "barcode": None,
        "grams": 250,
        "compare_at_price": None,
    }
    data.update(overrides)
    return data


def image_dict(position=1, **overrides):
    data = {
        "id": 900 + position,
        "position": position,
        "src": f"https://cdn.example.com/img{position}.jpg",
    }
    data.update(overrides)
    return data


def page_of(*products):
    return PageResponse.model_validate({"products": list(products)})


