"""
Fetch one page of a storefront's public product listing.
Pages are requested as {base_url}/products.json?limit=250&page=N.
"""
import logging
import requests
from pydantic import ValidationError
from config import DEFAULT_HEADERS, PRODUCTS_PER_PAGE, REQUEST_TIMEOUT
from models import PageResponse

log = logging.getLogger(__name__)


class ExtractionError(Exception):
    """Base class for errors that abort an extraction run."""


class FetchError(ExtractionError):
    def __init__(self, page_number: int, cause: str):
        self.page_number = page_number
        self.cause = cause
        super().__init__(f"page {page_number}: {cause}")


def new_session() -> requests.Session:
    session = requests.Session()
    session.headers.update(DEFAULT_HEADERS)
    return session


def normalize_base_url(base_url: str) -> str:
    return base_url.strip().rstrip("/")


def fetch_page(
    base_url: str,
    page_number: int,
    session: requests.Session | None = None,
    timeout: float = REQUEST_TIMEOUT,
) -> PageResponse:
    """Fetch and parse one page. Raises FetchError on any network, HTTP or shape failure."""
    if page_number < 1:
        raise ValueError(f"page_number must be >= 1, got {page_number}")
    url = f"{normalize_base_url(base_url)}/products.json"
    params = {"limit": PRODUCTS_PER_PAGE, "page": page_number}
    client = session or new_session()
    try:
        log.debug("GET %s %s", url, params)
        r = client.get(url, params=params, timeout=timeout)
        r.raise_for_status()
        data = r.json()
    except requests.exceptions.JSONDecodeError as e:
        raise FetchError(page_number, f"invalid JSON body: {e}") from e
    except requests.RequestException as e:
        raise FetchError(page_number, str(e)) from e
    except ValueError as e:
        raise FetchError(page_number, f"invalid JSON body: {e}") from e
    finally:
        if session is None:
            client.close()
    try:
        return PageResponse.model_validate(data)
    except ValidationError as e:
        raise FetchError(page_number, f"unexpected response shape: {e}") from e
