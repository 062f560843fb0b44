"""
Paginate through products.json and write every page to one CSV file.

Pages are fetched and written strictly in order, one at a time, starting at page 1
and stopping at the first empty page or the first error.
"""
import enum
import functools
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable
from csv_writer import WriteError, write_page
from models import PageResponse
from scraper import ExtractionError, FetchError, fetch_page, new_session, normalize_base_url

log = logging.getLogger(__name__)

Fetcher = Callable[[str, int], PageResponse]
Writer = Callable[[PageResponse, Path, bool], int]


class RunState(enum.Enum):
    DONE = "done"
    ABORTED = "aborted"


@dataclass
class RunResult:
    state: RunState
    total_products: int
    total_rows: int
    pages_written: int
    output_path: Path
    error: ExtractionError | None = None

    @property
    def ok(self) -> bool:
        return self.state is RunState.DONE


class PaginationDriver:
    def __init__(
        self,
        base_url: str,
        output_path: Path | str,
        fetcher: Fetcher | None = None,
        writer: Writer = write_page,
    ):
        self.base_url = normalize_base_url(base_url)
        self.output_path = Path(output_path)
        self.fetcher = fetcher
        self.writer = writer
        self.page_number = 1
        self.total_products = 0
        self.total_rows = 0
        self.pages_written = 0
        self._started = False

    def run(self) -> RunResult:
        if self._started:
            raise RuntimeError("PaginationDriver.run() can only be called once")
        self._started = True
        session = None
        fetcher = self.fetcher
        if fetcher is None:
            session = new_session()
            fetcher = functools.partial(fetch_page, session=session)
        try:
            error = self._loop(fetcher)
        finally:
            if session is not None:
                session.close()
        return self._finalize(error)

    def _loop(self, fetcher: Fetcher) -> ExtractionError | None:
        while True:
            try:
                page = fetcher(self.base_url, self.page_number)
            except FetchError as e:
                log.error("Error fetching page %s: %s", self.page_number, e.cause)
                return e
            if page.is_empty():
                log.info("No more products found. Stopping at page %s", self.page_number)
                return None

            log.info("Page %s: Found %s products", self.page_number, len(page))
            self.total_products += len(page)
            try:
                self.total_rows += self.writer(page, self.output_path, self.page_number == 1)
            except WriteError as e:
                log.error("Error writing page %s: %s", self.page_number, e)
                return e
            self.pages_written += 1
            self.page_number += 1

    def _finalize(self, error: ExtractionError | None) -> RunResult:
        if error is None:
            state = RunState.DONE
            log.info("Extraction completed! Total products: %s", self.total_products)
        else:
            state = RunState.ABORTED
            log.error(
                "Extraction aborted after %s page(s). Total products: %s",
                self.pages_written, self.total_products,
            )
        return RunResult(
            state=state,
            total_products=self.total_products,
            total_rows=self.total_rows,
            pages_written=self.pages_written,
            output_path=self.output_path,
            error=error,
        )
