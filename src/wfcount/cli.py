
from __future__ import annotations
import argparse
import logging
from typing import List, Optional

from . import config
from .counter import word_frequency
from .report import print_frequencies, to_json
from .titlecase import title_case

logger = logging.getLogger(__name__)

SAMPLE_TEXT = "Four, One two two three Three three four  four   four"

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="wfcount",
        description="Count word occurrences in the built-in sample text and print `word => count` lines.",
    )
    ap.add_argument("--sort", action="store_true", default=config.sort_output(),
                    help="Print words in lexicographic order (env WFCOUNT_SORT)")
    ap.add_argument("--json", action="store_true", default=config.json_output(),
                    help="Print a JSON report instead of plain lines (env WFCOUNT_JSON)")
    ap.add_argument("--title", action="store_true",
                    help="Print the title-cased sample text before the counts")
    args = ap.parse_args(argv)

    logging.basicConfig(level=config.log_level(), format="%(levelname)s %(name)s: %(message)s")
    logger.debug("input: %r", SAMPLE_TEXT)

    if args.title:
        print(title_case(SAMPLE_TEXT))

    freq = word_frequency(SAMPLE_TEXT)
    if args.json:
        print(to_json(freq, sort=args.sort))
    else:
        n = print_frequencies(freq, sort=args.sort)
        logger.debug("printed %d entries", n)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
