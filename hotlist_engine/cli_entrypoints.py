#!/usr/bin/env python3
"""Console-script wrappers for the hot-list push.

After an editable install (``pip install -e .``) the following commands become
available system-wide:

* ``wxhot-push``       – fetch, render and push the hot list once
* ``wxhot-push-test``  – same run, logged as a test push (``--test``)

Both exit 0 when WxPusher accepted the message and 1 otherwise, so a cron
entry can alert on the exit status.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .config import ConfigError, PushConfig
from .runner import PushRunner

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Push the WeChat hot-topic list through WxPusher")
    parser.add_argument(
        "--test",
        action="store_true",
        help="Run a test push (same behaviour, distinct log line)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log at DEBUG level",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry-point for one push run; returns the process exit code."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT)
    load_dotenv()

    try:
        config = PushConfig.from_env()
    except ConfigError as exc:
        LOGGER.error("❌ %s", exc)
        return 1

    config.log_summary()
    runner = PushRunner(config)
    success = runner.test_push() if args.test else runner.run()
    return 0 if success else 1


# ---------------------------------------------------------------------------
# Entry-points
# ---------------------------------------------------------------------------

def push() -> None:
    """Run a normal push and exit with its status."""
    sys.exit(main(sys.argv[1:]))


def push_test() -> None:
    """Run a test push – identical to ``wxhot-push --test``."""
    sys.exit(main(["--test", *sys.argv[1:]]))
