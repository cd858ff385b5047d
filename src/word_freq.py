from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd


def count_words(words: Iterable[str]) -> dict[str, int]:
    """Count occurrences, keeping keys in the order each word was first seen.

    The order matters downstream: it decides which node wins a tie when the
    tree is built.
    """
    freqs: dict[str, int] = {}
    for w in words:
        freqs[w] = freqs.get(w, 0) + 1
    return freqs


def to_frame(freqs: dict[str, int]) -> pd.DataFrame:
    return pd.DataFrame(
        {"word": list(freqs.keys()), "occurrence": list(freqs.values())},
        columns=["word", "occurrence"],
    )


def describe_counts(freqs: dict[str, int]) -> dict:
    counts = np.array(list(freqs.values()), dtype=np.int64)
    if counts.size == 0:
        return {"count": 0}
    return {
        "count": int(counts.size),
        "total": int(counts.sum()),
        "min": int(counts.min()),
        "max": int(counts.max()),
        "mean": float(counts.mean()),
        "p50": float(np.percentile(counts, 50)),
        "p90": float(np.percentile(counts, 90)),
    }
