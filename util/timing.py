# util/timing.py
import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator


@contextmanager
def timed(logger: logging.Logger, name: str, **kv: Any) -> Iterator[Dict[str, int]]:
    """
    Usage:
      with timed(logger, "hf.upload", bytes=n) as t:
          ...
      t["ms"]  # elapsed, available after the block

    Emits one DEBUG on exit: "<name>.timer ms=<int> key=val ..."; emitted on
    failure too so slow upstream errors are visible.
    """
    out: Dict[str, int] = {"ms": 0}
    t0 = time.perf_counter()
    try:
        yield out
    finally:
        out["ms"] = int((time.perf_counter() - t0) * 1000)
        suffix = "".join(f" {k}={v}" for k, v in kv.items())
        logger.debug("%s.timer ms=%d%s", name, out["ms"], suffix)
