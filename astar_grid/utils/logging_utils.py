# astar_grid/utils/logging_utils.py
from __future__ import annotations
import time
from dataclasses import dataclass
from typing import Optional

def log(msg: str) -> None:
    t = time.strftime("%H:%M:%S")
    print(f"[{t}] {msg}", flush=True)

def format_elapsed(seconds: float) -> str:
    if seconds < 1e-3:
        return f"{seconds * 1e6:.2f}µs"
    if seconds < 1.0:
        return f"{seconds * 1e3:.2f}ms"
    return f"{seconds:.2f}s"

@dataclass
class StageTimer:
    name: str
    start: Optional[float] = None
    elapsed: Optional[float] = None

    def __enter__(self):
        log(f"▶ START: {self.name}")
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - (self.start or time.perf_counter())
        if exc is None:
            log(f"✔ DONE:  {self.name}  (took {format_elapsed(self.elapsed)})")
        else:
            log(f"✖ FAIL:  {self.name}  (after {format_elapsed(self.elapsed)})  err={exc}")
        return False
