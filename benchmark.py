"""
Benchmark: typosee vs rapidfuzz.

rapidfuzz computes Levenshtein distance in C++; typosee is pure Python
and additionally reconstructs the edit script.  The point is NOT
"we're faster" — the point is to see what the trace-back costs and how
much the two-row pre-filter saves during a scan.
"""

import sys
import os
import random
import time

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from rapidfuzz.distance import Levenshtein

from typosee.core import distance, levenshtein
from typosee.scan import scan


BRANDS = ["paypal", "google", "microsoft", "amazon", "facebook", "apple", "netflix"]

PREFIXES = ["mail", "www", "login", "secure", "account", "vpn", "cdn", "api",
            "paypa1", "g00gle", "rnicrosoft", "amaz0n", "faceb00k", "app1e"]

DOMAINS = ["example.com", "example.net", "corp.org", "shop.io"]


def make_candidates(n: int, seed: int = 7) -> list[str]:
    """Synthetic subdomain export rows: id,first_seen,last_seen,fqdn"""
    rng = random.Random(seed)
    rows = []
    for i in range(n):
        depth = rng.randint(1, 3)
        labels = [rng.choice(PREFIXES) for _ in range(depth)]
        fqdn = ".".join(labels + [rng.choice(DOMAINS)])
        rows.append(f"{i},2024-01-01,2024-06-30,{fqdn}\n")
    return rows


def benchmark_pairs():
    """Single-pair timings."""
    print("=" * 70)
    print("  §1  SINGLE PAIRS")
    print("=" * 70)
    print()

    pairs = [("paypal", "paypa1"), ("microsoft", "rnicrosoft"),
             ("CHALK", "CHEESE"), ("intention", "execution")]
    rounds = 2000

    for s1, s2 in pairs:
        t0 = time.perf_counter()
        for _ in range(rounds):
            rf = Levenshtein.distance(s1, s2)
        rf_time = (time.perf_counter() - t0) / rounds

        t0 = time.perf_counter()
        for _ in range(rounds):
            d = levenshtein(s1, s2)
        lev_time = (time.perf_counter() - t0) / rounds

        t0 = time.perf_counter()
        for _ in range(rounds):
            result = distance(s1, s2)
        full_time = (time.perf_counter() - t0) / rounds

        print(f"  {s1!r:>12} → {s2!r:<12} d={d} (rapidfuzz {rf}, script {len(result.script)})")
        print(f"    rapidfuzz:        {rf_time*1e6:8.2f}µs")
        print(f"    levenshtein():    {lev_time*1e6:8.2f}µs")
        print(f"    distance():       {full_time*1e6:8.2f}µs")
    print()


def benchmark_scan():
    """Keyword × line scans of growing size."""
    print("=" * 70)
    print("  §2  SCAN")
    print("=" * 70)
    print()

    for n in [100, 1000, 5000]:
        candidates = make_candidates(n)
        for threshold in [1, 3]:
            t0 = time.perf_counter()
            records = list(scan(BRANDS, candidates, threshold))
            dt = time.perf_counter() - t0
            print(f"  {n:>5} lines × {len(BRANDS)} keywords, threshold {threshold}: "
                  f"{len(records):>6} matches  {dt*1000:>9.1f}ms")
    print()


def main():
    print()
    print("╔══════════════════════════════════════════════════════════════════════╗")
    print("║          TYPOSEE — BENCHMARK SUITE                                   ║")
    print("╚══════════════════════════════════════════════════════════════════════╝")
    print()

    benchmark_pairs()
    benchmark_scan()


if __name__ == "__main__":
    main()
