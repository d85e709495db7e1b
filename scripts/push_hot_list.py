#!/usr/bin/env python3

"""
WeChat Hot-List Push
Runs one push in the usual order:
1. Fetch the hot list from TianAPI (falls back to an empty list on failure)
2. Render the top N topics as HTML
3. Deliver the HTML through WxPusher

Usage
-----
python scripts/push_hot_list.py          # normal run (e.g. from cron)
python scripts/push_hot_list.py --test   # test push, same exit semantics

The script is intentionally thin and delegates to
`hotlist_engine.cli_entrypoints.main` so the cron entry works from a plain
checkout without installing the console scripts.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hotlist_engine.cli_entrypoints import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
