"""Simple logging setup - progress and anomalies go to stderr, report lines to stdout."""

import logging
import sys


def setup_logging(verbose: bool = False):
    """Setup logging to stderr. DEBUG when verbose, WARNING otherwise."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr, force=True)
