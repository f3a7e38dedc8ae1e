"""
FraudShield Alert History

Bounded, newest-first log of analysis results with running counters.
"""

import logging
import threading
from collections import Counter, deque
from typing import Deque, Tuple

from fraudshield.models.detection import AlertStats, AnalysisResult
from fraudshield.utils.constants import DEFAULT_HISTORY_SIZE

logger = logging.getLogger(__name__)


class AlertHistory:
    """
    Most-recent-first buffer of results.

    Appends and counter updates happen under one lock so the log never
    exceeds its capacity and the counters always agree with what was
    recorded.
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_SIZE):
        if capacity <= 0:
            raise ValueError(f"History capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._results: Deque[AnalysisResult] = deque(maxlen=capacity)
        self._total_evaluated = 0
        self._total_blocked = 0
        self._lock = threading.Lock()

    def record(self, result: AnalysisResult) -> None:
        """Prepend a result, evicting the oldest beyond capacity."""
        with self._lock:
            self._results.appendleft(result)
            self._total_evaluated += 1
            if result.blocked:
                self._total_blocked += 1

    def results(self) -> Tuple[AnalysisResult, ...]:
        """Snapshot of retained results, newest first."""
        with self._lock:
            return tuple(self._results)

    @property
    def total_evaluated(self) -> int:
        return self._total_evaluated

    @property
    def total_blocked(self) -> int:
        return self._total_blocked

    def stats(self) -> AlertStats:
        """Snapshot of counters and threat level distribution."""
        with self._lock:
            return self._stats()

    def snapshot(self) -> Tuple[Tuple[AnalysisResult, ...], AlertStats]:
        """Results and counters taken together under one lock."""
        with self._lock:
            return tuple(self._results), self._stats()

    def _stats(self) -> AlertStats:
        by_level = Counter(r.threat_level.value for r in self._results)
        return AlertStats(
            total_evaluated=self._total_evaluated,
            total_blocked=self._total_blocked,
            history_size=len(self._results),
            capacity=self.capacity,
            by_threat_level=dict(by_level),
        )

    def clear(self) -> None:
        """Drop all results and reset counters."""
        with self._lock:
            self._results.clear()
            self._total_evaluated = 0
            self._total_blocked = 0
        logger.info("Alert history cleared")

    def __len__(self) -> int:
        return len(self._results)
