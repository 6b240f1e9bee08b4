#!/usr/bin/env python3
"""
Stable declension benchmark with a median throughput gate.

Every measurement runs in a fresh subprocess with a fixed hash seed; the
parent reports mean/median/CV of full-name declensions per second.

    python scripts/benchmark.py --runs 5 --language uk --min-median-names-per-sec 20000
"""

from __future__ import annotations

import argparse
import gc
import itertools
import json
import os
import statistics
import subprocess
import sys
import time

from slavonym import NameCaseEngine

NAME_PARTS = {
    "ru": (
        ("Иванов", "Петров-Водкин", "Толстой", "Шевченко", "Облогин", "Воробей", "Козленок", "ДеГоль"),
        ("Петр", "Денис", "Лев", "Андрей", "Игорь", "Никита", "Илья"),
        ("Сергеевич", "Николаевич", "Ильич", ""),
    ),
    "uk": (
        ("Шевченко", "Петров", "Орел", "Соловей", "Кравець", "Косач", "Облогін"),
        ("Тарас", "Микола", "Федір", "Ігор", "Андрій", "Олег", "Денис"),
        ("Григорович", "Петрович", ""),
    ),
}


def generate_test_names(language: str, count: int) -> list[str]:
    """Deterministic surname/first name/patronymic combinations, repeated up to ``count``."""
    combos = [" ".join(filter(None, parts)) for parts in itertools.product(*NAME_PARTS[language])]
    return list(itertools.islice(itertools.cycle(combos), count))


def _run_worker(language: str, names_count: int, warmup_count: int) -> dict[str, float | int]:
    """Run one isolated benchmark measurement in-process."""
    engine = NameCaseEngine(language)
    names = generate_test_names(language, names_count)

    warmup = min(warmup_count, len(names))
    for name in names[:warmup]:
        engine.q(name)

    gc.collect()
    gc_enabled = gc.isenabled()
    if gc_enabled:
        gc.disable()

    try:
        start = time.perf_counter()
        for name in names:
            engine.q(name)
        end = time.perf_counter()
    finally:
        if gc_enabled:
            gc.enable()

    elapsed = end - start
    names_per_sec = len(names) / elapsed if elapsed > 0 else 0.0
    return {
        "elapsed_seconds": elapsed,
        "names_per_second": names_per_sec,
        "name_count": len(names),
    }


def _run_subprocess_worker(args: argparse.Namespace, run_idx: int) -> dict[str, float | int]:
    env = os.environ.copy()
    env["PYTHONHASHSEED"] = str(args.hash_seed)
    env["PYTHONIOENCODING"] = "utf-8"

    cmd = [
        sys.executable,
        __file__,
        "--worker",
        "--language",
        args.language,
        "--names",
        str(args.names),
        "--warmup",
        str(args.warmup),
    ]
    result = subprocess.run(  # noqa: S603
        cmd,
        capture_output=True,
        text=True,
        encoding="utf-8",
        check=False,
        env=env,
    )
    if result.returncode != 0:
        message = (
            f"Worker {run_idx} failed with code {result.returncode}.\n"
            f"STDOUT:\n{result.stdout}\nSTDERR:\n{result.stderr}"
        )
        raise RuntimeError(message)

    for raw_line in reversed(result.stdout.splitlines()):
        candidate = raw_line.strip()
        if candidate.startswith("{") and candidate.endswith("}"):
            return json.loads(candidate)

    message = f"Worker {run_idx} did not emit JSON output.\nSTDOUT:\n{result.stdout}"
    raise RuntimeError(message)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Declension benchmark with median gate.")
    parser.add_argument("--runs", type=int, default=5, help="Number of isolated runs.")
    parser.add_argument("--language", choices=sorted(NAME_PARTS), default="ru", help="Rule pack to benchmark.")
    parser.add_argument("--names", type=int, default=5000, help="Number of full names declined per run.")
    parser.add_argument("--warmup", type=int, default=1000, help="Names declined before timing in each run.")
    parser.add_argument("--hash-seed", type=int, default=42, help="PYTHONHASHSEED used for each worker subprocess.")
    parser.add_argument(
        "--min-median-names-per-sec",
        type=float,
        default=0.0,
        help="Optional gate: fail (exit 1) when median names/sec is below this value.",
    )
    parser.add_argument("--worker", action="store_true", help=argparse.SUPPRESS)
    return parser


def main() -> int:
    args = _build_arg_parser().parse_args()

    if args.worker:
        print(json.dumps(_run_worker(args.language, args.names, args.warmup)))
        return 0

    if args.runs < 1:
        message = "--runs must be >= 1"
        raise ValueError(message)

    print("=" * 72)
    print("SLAVONYM DECLENSION BENCHMARK")
    print("=" * 72)
    print(f"language={args.language} runs={args.runs} names={args.names} warmup={args.warmup}")
    print()

    rates = []
    for run_idx in range(1, args.runs + 1):
        payload = _run_subprocess_worker(args, run_idx)
        rates.append(float(payload["names_per_second"]))
        print(f"run {run_idx}: {payload['elapsed_seconds']:.6f}s | {payload['names_per_second']:.0f} names/sec")

    median_rate = statistics.median(rates)
    mean_rate = statistics.mean(rates)
    stdev_rate = statistics.stdev(rates) if len(rates) > 1 else 0.0
    cv_rate = (stdev_rate / mean_rate * 100.0) if mean_rate else 0.0

    print()
    print(f"rate_mean_names_per_second={mean_rate:.2f}")
    print(f"rate_cv_percent={cv_rate:.2f}")
    print(f"MEDIAN_NAMES_PER_SECOND={median_rate:.2f}")

    if args.min_median_names_per_sec > 0 and median_rate < args.min_median_names_per_sec:
        print(f"GATE=FAIL (median {median_rate:.2f} < required {args.min_median_names_per_sec:.2f})")
        return 1

    print("GATE=PASS")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
