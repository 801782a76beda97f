from __future__ import annotations

import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Optional

from fourinrow.ai.advisor import MoveAdvisor, Suggestion
from fourinrow.game.state import GameSnapshot

logger = logging.getLogger(__name__)


class HintService:
    """
    Runs advisor searches off the caller's thread.

    A search cannot be interrupted, so every request is tagged with a
    generation number; a result is kept only if no newer request,
    invalidate() or disable() happened while it was running.
    """

    def __init__(self, advisor: Optional[MoveAdvisor] = None, executor: Optional[Executor] = None) -> None:
        self.advisor = advisor or MoveAdvisor()
        self._own_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="hint")
        self._lock = threading.Lock()
        self._generation = 0
        self._enabled = False
        self._current: Optional[Suggestion] = None
        self._pending: Optional[Future] = None

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def pending(self) -> Optional[Future]:
        return self._pending

    @property
    def generation(self) -> int:
        return self._generation

    def enable(self) -> None:
        self._enabled = True

    def disable(self) -> None:
        with self._lock:
            self._enabled = False
            self._generation += 1
            self._current = None

    def invalidate(self) -> None:
        with self._lock:
            self._generation += 1
            self._current = None

    def request(self, snapshot: GameSnapshot) -> Future:
        with self._lock:
            self._generation += 1
            ticket = self._generation
            self._current = None

        fut = self._executor.submit(self._search, ticket, snapshot)
        self._pending = fut
        return fut

    def _search(self, ticket: int, snapshot: GameSnapshot) -> Optional[Suggestion]:
        # The advisor keeps per-search stats, so each job gets its own instance
        advisor = MoveAdvisor(name=self.advisor.name, depth=self.advisor.depth)
        best = advisor.find_best_move(snapshot, snapshot.current)
        with self._lock:
            if ticket != self._generation or not self._enabled:
                logger.debug("discarding stale hint (ticket %d, now %d)", ticket, self._generation)
                return None
            self._current = best
        return best

    def current(self) -> Optional[Suggestion]:
        return self._current

    def wait(self, timeout: Optional[float] = None) -> Optional[Suggestion]:
        fut = self._pending
        if fut is not None:
            fut.result(timeout=timeout)
        return self._current

    def shutdown(self) -> None:
        if self._own_executor:
            self._executor.shutdown(wait=True)

    def __enter__(self) -> "HintService":
        return self

    def __exit__(self, *exc) -> None:
        self.shutdown()
