import os
from datetime import datetime, timezone
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

PRODUCTS_PER_PAGE = 250

REQUEST_TIMEOUT = float(os.getenv("SCRAPER_REQUEST_TIMEOUT", "30"))
OUTPUT_DIR = os.getenv("SCRAPER_OUTPUT_DIR", ".")
OUTPUT_FILENAME_TEMPLATE = "products_{date}.csv"

USER_AGENT = os.getenv(
    "SCRAPER_USER_AGENT",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/138.0.0.0 Safari/537.36",
)

DEFAULT_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,image/apng,*/*;q=0.8",
    "Accept-Language": "en-GB,en;q=0.8",
    "Cache-Control": "max-age=0",
    "Sec-Ch-Ua": '"Not)A;Brand";v="8", "Chromium";v="138"',
    "Sec-Ch-Ua-Mobile": "?0",
    "Sec-Ch-Ua-Platform": '"Linux"',
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Site": "none",
    "Sec-Fetch-User": "?1",
    "Sec-Gpc": "1",
}


def output_path_for_run(output_dir: str | None = None, now: datetime | None = None) -> Path:
    """products_YYYY-MM-DD.csv for the run's UTC start date."""
    now = now or datetime.now(timezone.utc)
    name = OUTPUT_FILENAME_TEMPLATE.format(date=now.astimezone(timezone.utc).date().isoformat())
    return Path(output_dir or OUTPUT_DIR) / name
