"""Run the resource collector for a few seconds and print the result as JSON."""

from __future__ import annotations

import json
import logging
import sys
import time
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from resource_sampler import DataCollector, PsutilProvider


def main(duration: float = 3.0) -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    collector = DataCollector(PsutilProvider())
    print(f"Sampling for {duration:.1f}s")
    collector.start()
    try:
        time.sleep(duration)
    finally:
        collector.stop(timeout=5.0)
    history = collector.history()
    print(json.dumps({**collector.snapshot(), "history_points": len(history)}, indent=2))


if __name__ == "__main__":
    main(float(sys.argv[1]) if len(sys.argv) > 1 else 3.0)
