from __future__ import annotations

"""JSON line trace logger for traversal events."""

import csv
import json
from collections import Counter
from pathlib import Path
from typing import Any

from ...config import Config


class MetricAggregator:
    """Aggregate event counts per frame and write ``metrics.csv``."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.counts: Counter[str] = Counter()

    def add(self, frame: int, label: str) -> None:
        """Increment the count for ``label`` in ``frame``."""

        self.counts[label] += 1

    def flush(self, frame: int) -> None:
        """Write accumulated counts for ``frame`` to ``metrics.csv``."""

        if not self.counts:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        file_exists = self.path.exists()
        with self.path.open("a", newline="") as fh:
            writer = csv.DictWriter(fh, fieldnames=["frame", "label", "count"])
            if not file_exists:
                writer.writeheader()
            for label in sorted(self.counts):
                writer.writerow(
                    {"frame": frame, "label": label, "count": self.counts[label]}
                )
        self.counts.clear()


_AGGREGATOR: MetricAggregator | None = None


def _get_aggregator() -> MetricAggregator:
    global _AGGREGATOR
    path = Path(Config.output_dir) / "metrics.csv"
    if _AGGREGATOR is None or _AGGREGATOR.path != path:
        _AGGREGATOR = MetricAggregator(path)
    return _AGGREGATOR


def log_record(
    category: str,
    label: str,
    *,
    frame: int | None = None,
    value: dict[str, Any] | None = None,
    path: Path | None = None,
    **extra: Any,
) -> None:
    """Append a record to a JSON lines log file.

    Nothing is written unless :meth:`Config.is_log_enabled` allows
    ``category``/``label``.
    """

    if not Config.is_log_enabled(category, label):
        return
    if path is None:
        path = Path(Config.output_dir) / f"{category}_log.jsonl"
    path.parent.mkdir(parents=True, exist_ok=True)
    data: dict[str, Any] = {"label": label}
    if frame is not None:
        data["frame"] = frame
    if value is not None:
        data.update(value)
    if extra:
        data.update(extra)
    with path.open("a") as fh:
        fh.write(json.dumps(data) + "\n")
    if frame is not None:
        _get_aggregator().add(frame, label)


def flush_metrics(frame: int) -> None:
    """Flush aggregated metrics for ``frame`` to disk."""

    _get_aggregator().flush(frame)
