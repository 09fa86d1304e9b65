"""Cumulative wall-clock timing of version resolution."""

from __future__ import annotations

import contextlib
import json
import threading
import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from collections.abc import Iterator

TOTAL_KEY = "total"


class Timer:
	"""Thread-safe accumulator of elapsed milliseconds per key."""

	def __init__(self) -> None:
		self._lock = threading.Lock()
		self._elapsed_ms: dict[str, float] = {}

	@contextlib.contextmanager
	def time(self, key: str) -> Iterator[None]:
		"""Add the time spent inside the ``with`` block to ``key``."""
		start = time.perf_counter()
		try:
			yield
		finally:
			self.record(key, (time.perf_counter() - start) * 1000)

	def record(self, key: str, elapsed_ms: float) -> None:
		"""Add ``elapsed_ms`` milliseconds to ``key``."""
		with self._lock:
			self._elapsed_ms[key] = self._elapsed_ms.get(key, 0.0) + elapsed_ms

	def elapsed_ms(self, key: str) -> float:
		"""Get the milliseconds recorded for ``key`` so far."""
		with self._lock:
			return self._elapsed_ms.get(key, 0.0)

	def total_ms(self) -> float:
		"""Get the milliseconds recorded across all keys."""
		with self._lock:
			return sum(self._elapsed_ms.values())

	def to_dict(self) -> dict[str, float]:
		"""Snapshot of the recorded times, including a ``total`` entry."""
		with self._lock:
			snapshot = dict(self._elapsed_ms)
		snapshot[TOTAL_KEY] = sum(snapshot.values())
		return snapshot

	def to_json(self) -> str:
		"""Serialize the recorded times as a JSON object."""
		return json.dumps(self.to_dict(), sort_keys=True)
