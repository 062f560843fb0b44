"""Shared test fixtures."""

import pytest

from models import PageResponse
from tests.factories import image_dict, page_of, product_dict, variant_dict


@pytest.fixture
def empty_page():
    return PageResponse(products=[])


@pytest.fixture
def three_variants_one_image():
    """Product with more variants than images."""
    return page_of(
        product_dict(
            "hoodie",
            variants=[variant_dict(1), variant_dict(2), variant_dict(3)],
            images=[image_dict(1)],
        )
    )


@pytest.fixture
def scenario_page():
    """Product A: 1 variant / 1 image. Product B: no variants / 2 images."""
    return page_of(
        product_dict("product-a", variants=[variant_dict(10)], images=[image_dict(1)]),
        product_dict("product-b", images=[image_dict(1), image_dict(2)]),
    )
