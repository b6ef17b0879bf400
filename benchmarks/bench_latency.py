"""Benchmark: event_from_error and Hub.capture_error latency (p50/p95/mean)."""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from errorchain.chain.assembler import event_from_error
from errorchain.hub.client import Client
from errorchain.hub.hub import Hub
from errorchain.transport.base import NullTransport

_WARMUP: int = 100
_ITERATIONS: int = 3_000
_CHAIN_DEPTH: int = 5


def _make_chain(depth: int) -> BaseException:
    error: BaseException = KeyError("root")
    for level in range(1, depth):
        wrapper = RuntimeError(f"level {level}")
        wrapper.__cause__ = error
        error = wrapper
    return error


def _summarise(operation: str, latencies_ms: list[float]) -> dict[str, object]:
    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = sum(latencies_ms) / 1000
    return {
        "operation": operation,
        "iterations": n,
        "chain_depth": _CHAIN_DEPTH,
        "total_seconds": round(total, 4),
        "ops_per_second": round(n / total, 1) if total else 0.0,
        "avg_latency_ms": round(sum(latencies_ms) / n, 4),
        "p50_ms": round(sorted_lats[int(n * 0.50)], 4),
        "p95_ms": round(sorted_lats[min(int(n * 0.95), n - 1)], 4),
    }


def bench_event_from_error_latency(iterations: int = _ITERATIONS) -> dict[str, object]:
    """Benchmark pure event assembly for a fixed-depth exception chain."""
    error = _make_chain(_CHAIN_DEPTH)
    for _ in range(_WARMUP):
        event_from_error(error)

    latencies_ms: list[float] = []
    for _ in range(iterations):
        t0 = time.perf_counter()
        event_from_error(error)
        latencies_ms.append((time.perf_counter() - t0) * 1000)

    result = _summarise("event_from_error_latency", latencies_ms)
    print(
        f"[bench_latency] {result['operation']}: "
        f"p50={result['p50_ms']:.4f}ms  p95={result['p95_ms']:.4f}ms  "
        f"mean={result['avg_latency_ms']:.4f}ms"
    )
    return result


def bench_capture_error_latency(iterations: int = _ITERATIONS) -> dict[str, object]:
    """Benchmark hub capture (assembly + stamping + null transport)."""
    hub = Hub(Client(transport=NullTransport()))
    error = _make_chain(_CHAIN_DEPTH)
    for _ in range(_WARMUP):
        hub.capture_error(error)

    latencies_ms: list[float] = []
    for _ in range(iterations):
        t0 = time.perf_counter()
        hub.capture_error(error)
        latencies_ms.append((time.perf_counter() - t0) * 1000)

    result = _summarise("capture_error_latency", latencies_ms)
    print(
        f"[bench_latency] {result['operation']}: "
        f"p50={result['p50_ms']:.4f}ms  p95={result['p95_ms']:.4f}ms  "
        f"mean={result['avg_latency_ms']:.4f}ms"
    )
    return result


if __name__ == "__main__":
    results = [bench_event_from_error_latency(), bench_capture_error_latency()]
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "latency_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(results, fh, indent=2)
    print(f"Results saved to {output_path}")
