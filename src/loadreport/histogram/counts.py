from __future__ import annotations

from typing import Sequence

import numpy as np

from loadreport.results import Results


def histogram(buckets: Sequence[int], results: Results) -> list[int]:
    """Count results per half-open latency bucket.

    Bucket ``i`` covers ``[buckets[i], buckets[i + 1])`` and the last one is
    unbounded above. Latencies below ``buckets[0]`` are counted in bucket 0.
    """
    if not results:
        return [0] * len(buckets)
    edges = np.asarray(buckets, dtype=np.int64)
    latencies = np.fromiter((r.latency_ns for r in results), dtype=np.int64, count=len(results))
    idx = np.searchsorted(edges, latencies, side="right") - 1
    idx = np.clip(idx, 0, None)
    counts = np.bincount(idx, minlength=len(edges))
    return [int(c) for c in counts]
