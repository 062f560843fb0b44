"""
Storefront catalog export: products.json pages -> products_YYYY-MM-DD.csv.
"""
import argparse
import logging
import sys
from config import output_path_for_run
from pipeline import PaginationDriver

log = logging.getLogger(__name__)


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int):
        super().__init__()
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self.max_level


def setup_logging(verbose: bool = False) -> None:
    """Progress to stdout, warnings and errors to stderr."""
    stdout = logging.StreamHandler(sys.stdout)
    stdout.addFilter(_MaxLevelFilter(logging.INFO))
    stderr = logging.StreamHandler(sys.stderr)
    stderr.setLevel(logging.WARNING)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[stdout, stderr],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="storefront-export",
        description="Export a storefront's products.json catalog to CSV",
    )
    p.add_argument("base_url", help="Store origin, e.g. https://store.example.com")
    p.add_argument("--output-dir", default=None, help="Directory for products_YYYY-MM-DD.csv (default: SCRAPER_OUTPUT_DIR or cwd)")
    p.add_argument("-v", "--verbose", action="store_true", help="Log every request")
    return p


def run(base_url: str, output_dir: str | None = None) -> int:
    output_path = output_path_for_run(output_dir)
    result = PaginationDriver(base_url, output_path).run()
    return 0 if result.ok else 1


def cli(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    if not args.base_url.startswith(("http://", "https://")):
        p.error(f"base_url must start with http:// or https://, got {args.base_url!r}")
    setup_logging(verbose=args.verbose)
    return run(args.base_url, output_dir=args.output_dir)


if __name__ == "__main__":
    sys.exit(cli())
