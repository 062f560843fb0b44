"""
Append flattened product rows to the run's CSV file.
"""
import csv
import logging
import os
from pathlib import Path
from models import PageResponse
from product_mapper import CSV_FIELDNAMES, page_to_rows
from scraper import ExtractionError

log = logging.getLogger(__name__)


class WriteError(ExtractionError):
    def __init__(self, path: Path | str, cause: str):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"{path}: {cause}")


def write_page(page: PageResponse, path: Path | str, is_first_page: bool) -> int:
    """
    Write one page of rows. The first page truncates the file and writes the header;
    later pages append to the file the first page created, which must still exist.
    Returns the number of data rows written.
    """
    # later pages never create the file
    mode = "w" if is_first_page else "r+"
    written = 0
    try:
        with open(path, mode, encoding="utf-8", newline="") as f:
            if not is_first_page:
                f.seek(0, os.SEEK_END)
            writer = csv.writer(f)
            if is_first_page:
                writer.writerow(CSV_FIELDNAMES)
            for row in page_to_rows(page):
                writer.writerow(row)
                written += 1
            f.flush()
    except (OSError, UnicodeError, csv.Error) as e:
        raise WriteError(path, str(e)) from e
    if is_first_page:
        log.info("Data written to %s", path)
    log.debug("Wrote %s rows to %s", written, path)
    return written
