"""Tokenizer throughput benchmark: vary input length and quoting density."""
from __future__ import annotations

import argparse
import gc
import time
import tracemalloc
from typing import Callable

from qpath import Path, Trimming


def _best_of(fn: Callable[[], None], repeat: int) -> tuple[float, float]:
    """Fastest wall time in ms over ``repeat`` runs, and the peak traced KiB."""
    best = float("inf")
    peak_kib = 0.0
    for _ in range(repeat):
        gc.collect()
        tracemalloc.start()
        started = time.perf_counter()
        fn()
        best = min(best, time.perf_counter() - started)
        peak_kib = max(peak_kib, tracemalloc.get_traced_memory()[1] / 1024.0)
        tracemalloc.stop()
    return best * 1000, peak_kib


def _make_input(segments: int, quoted_every: int) -> str:
    parts = []
    for i in range(segments):
        if quoted_every and i % quoted_every == 0:
            parts.append(f"'dir/{i}'")
        elif i % 7 == 0:
            parts.append(".")
        else:
            parts.append(f"dir{i}")
    return "/" + "/".join(parts)


def _parse(raw: str) -> None:
    Path(raw)


def _parse_and_trim(raw: str) -> None:
    Path(raw).to_raw(Trimming.all)


def main() -> None:
    parser = argparse.ArgumentParser(description="qpath tokenizer throughput")
    parser.add_argument("--sizes", type=int, nargs="+", default=[100, 1_000, 10_000, 100_000])
    parser.add_argument("--quoted-every", type=int, default=5)
    parser.add_argument("--repeat", type=int, default=5)
    args = parser.parse_args()

    print(f"{'segments':>10} {'chars':>10} {'parse ms':>10} {'trim ms':>10} {'peak KiB':>10}")
    for size in args.sizes:
        raw = _make_input(size, args.quoted_every)
        parse_ms, peak = _best_of(lambda: _parse(raw), args.repeat)
        trim_ms, _ = _best_of(lambda: _parse_and_trim(raw), args.repeat)
        print(
            f"{size:>10} {len(raw):>10} {parse_ms:>10.2f} "
            f"{trim_ms:>10.2f} {peak:>10.1f}"
        )


if __name__ == "__main__":
    main()
