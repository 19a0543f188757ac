"""Enumerate and print every topology on a small set.

Prints each topology as a family of subsets, the total count, and
optionally the neighbourhood system of every point.

Usage:
    python -m experiments.enumerate_topologies --elements a b c
    python -m experiments.enumerate_topologies --elements 1 2 3 4 --progress --output t4.json
    python -m experiments.enumerate_topologies --elements a b c d e --timeout 60
"""

from __future__ import annotations
import argparse
import json
import sys
import threading
import time
from typing import Any, Dict, Hashable, Iterable, List, Optional

from finite_topology import (
    CancellationToken,
    EnumerationCancelled,
    EnumerationConfig,
    InvalidInputError,
    SizeLimitError,
    neighbourhood_system,
    summarize,
    topologies,
)


def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description="Enumerate all topologies on a finite set")
    p.add_argument("--elements", nargs="*", default=["a", "b", "c"], help="Elements of the base set")
    p.add_argument("--neighbourhoods", action="store_true", help="Print neighbourhood systems")
    p.add_argument("--progress", action="store_true", help="Report progress on stderr")
    p.add_argument("--progress-interval", type=int, default=100, help="Candidates between progress reports")
    p.add_argument("--timeout", type=float, default=None, help="Cancel after this many seconds")
    p.add_argument("--output", type=str, default=None, help="Output JSON file")
    p.add_argument("--quiet", action="store_true", help="Only print the summary")
    return p.parse_args(argv)


def _sorted_strs(subset: Iterable[Hashable]) -> List[str]:
    return sorted(str(e) for e in subset)


def format_subset(subset: Iterable[Hashable]) -> str:
    """Render a subset as ``{a, b}``, elements sorted for display."""
    return "{" + ", ".join(_sorted_strs(subset)) + "}"


def format_family(family: Iterable[Iterable[Hashable]]) -> str:
    """Render a family as ``{{}, {a}, {a, b}}``, smaller subsets first."""
    members = sorted(family, key=lambda s: (len(s), _sorted_strs(s)))
    return "{" + ", ".join(format_subset(s) for s in members) + "}"


def _to_json(family) -> List[List[str]]:
    return sorted((_sorted_strs(s) for s in family), key=lambda s: (len(s), s))


class _StderrProgress:
    """Progress sink printing whole-percent changes to stderr."""

    def __init__(self):
        self.last: Optional[int] = None

    def __call__(self, percent: float) -> None:
        p = int(percent)
        if p != self.last:
            self.last = p
            print(f"\r  progress: {p:3d}%", end="", file=sys.stderr, flush=True)


def run(
    elements: List[Hashable],
    neighbourhoods: bool = False,
    progress=None,
    token: Optional[CancellationToken] = None,
    config: Optional[EnumerationConfig] = None,
    verbose: bool = True,
) -> Dict[str, Any]:
    """Enumerate topologies on ``elements`` and collect printable results."""
    base = frozenset(elements)
    results: Dict[str, Any] = {"elements": _sorted_strs(base), "topologies": []}

    for index, t in enumerate(topologies(base, progress=progress, token=token, config=config)):
        summary = summarize(base, t)
        entry: Dict[str, Any] = {
            "open_sets": _to_json(t),
            "t0": summary.t0,
            "n_basis_sets": summary.n_basis_sets,
        }
        if verbose:
            print(f"  [{index + 1:4d}] {format_family(t)}")
        if neighbourhoods:
            entry["neighbourhoods"] = {}
            for x in sorted(base, key=str):
                nbhd = neighbourhood_system(base, t, x)
                entry["neighbourhoods"][str(x)] = _to_json(nbhd)
                if verbose:
                    print(f"         N({x}) = {format_family(nbhd)}")
        results["topologies"].append(entry)

    results["count"] = len(results["topologies"])
    results["t0_count"] = sum(1 for e in results["topologies"] if e["t0"])
    return results


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    base = frozenset(args.elements)

    print("=" * 60)
    print(f"TOPOLOGIES ON {format_subset(base)}")
    print("=" * 60)

    token = CancellationToken()
    timer = None
    if args.timeout is not None:
        timer = threading.Timer(args.timeout, token.cancel)
        timer.daemon = True
        timer.start()

    start = time.time()
    try:
        results = run(
            args.elements,
            neighbourhoods=args.neighbourhoods,
            progress=_StderrProgress() if args.progress else None,
            token=token,
            config=EnumerationConfig(progress_interval=args.progress_interval),
            verbose=not args.quiet,
        )
    except (SizeLimitError, InvalidInputError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except (EnumerationCancelled, KeyboardInterrupt) as e:
        token.cancel()
        print(f"\nCancelled: {str(e) or 'interrupted'}", file=sys.stderr)
        return 1
    finally:
        if timer is not None:
            timer.cancel()
        if args.progress:
            print(file=sys.stderr)

    results["elapsed_s"] = time.time() - start

    print("-" * 60)
    print(f"  Topologies: {results['count']} ({results['t0_count']} T0)")
    print(f"  Elapsed:    {results['elapsed_s']:.2f}s")

    if args.output:
        with open(args.output, "w") as f:
            json.dump(results, f, indent=2, default=str)
        print(f"\nResults saved to: {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
