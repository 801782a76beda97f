from __future__ import annotations
import sys
import time
from concurrent.futures import Future
from typing import Optional

from fourinrow.config import AI_THINKING_SPINNER, AI_THINK_DELAY_SEC


def thinking(fut: Optional[Future], label: str = "Advisor is thinking") -> None:
    """
    Spin until the hint search behind `fut` finishes.
    A short minimum delay keeps the spinner from flashing.
    """
    if fut is None:
        return
    if fut.done():
        fut.result()
        return

    if not AI_THINKING_SPINNER:
        fut.result()
        return

    frames = ["|", "/", "-", "\\"]
    start = time.time()
    i = 0
    while not fut.done() or (time.time() - start) < AI_THINK_DELAY_SEC:
        sys.stdout.write(f"\r{label}... {frames[i % len(frames)]}")
        sys.stdout.flush()
        time.sleep(0.08)
        i += 1
    sys.stdout.write("\r" + (" " * (len(label) + 10)) + "\r")
    sys.stdout.flush()
    fut.result()
