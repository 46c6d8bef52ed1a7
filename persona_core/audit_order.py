from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from . import config
from .question_bank import QUESTIONS, TRAITS
from .shuffle import make_question_order, max_trait_run, questions_from_order

log = logging.getLogger(__name__)


def _sample_seeds(count: int) -> list[str]:
    return [f"audit-{i}" for i in range(count)]


def audit_orders(seeds: Iterable[str], max_same_trait_in_row: int | None = None) -> dict[str, object]:
    limit = config.MAX_SAME_TRAIT_IN_ROW if max_same_trait_in_row is None else max_same_trait_in_row
    total = len(QUESTIONS)
    # trait -> count of appearances at each position
    positions: dict[str, list[int]] = {t: [0] * total for t in TRAITS}
    run_hist: dict[int, int] = {}
    violations: list[str] = []
    not_permutation: list[str] = []
    sampled = 0

    for seed in seeds:
        sampled += 1
        order = make_question_order(seed, limit)
        if sorted(order) != sorted(q.id for q in QUESTIONS):
            not_permutation.append(seed)
            continue
        questions = questions_from_order(order)
        run = max_trait_run(questions)
        run_hist[run] = run_hist.get(run, 0) + 1
        if limit > 0 and run > limit:
            violations.append(seed)
        for idx, q in enumerate(questions):
            positions[q.trait][idx] += 1

    warnings: list[str] = []
    if not_permutation:
        warnings.append(f"{len(not_permutation)} orders are not permutations of the question set")
    if violations:
        warnings.append(f"{len(violations)} orders exceed {limit} same-trait questions in a row")

    spread = {t: (min(p), max(p)) for t, p in positions.items()} if sampled else {}
    return {
        "sampled": sampled,
        "limit": limit,
        "run_histogram": {str(k): v for k, v in sorted(run_hist.items())},
        "position_spread": {t: list(v) for t, v in spread.items()},
        "violations": violations,
        "not_permutation": not_permutation,
        "warnings": warnings,
    }


def print_report(summary: dict[str, object]) -> None:
    print("=== Question Order Audit ===")
    print(f"Seeds sampled: {summary['sampled']}  run limit: {summary['limit']}")
    print("\nLongest same-trait run:")
    for run, count in summary["run_histogram"].items():  # type: ignore[union-attr]
        print(f"  {run}: {count:5d}")
    print("\nPer-position count range (min..max):")
    for trait, (lo, hi) in summary["position_spread"].items():  # type: ignore[union-attr]
        print(f"  {trait}: {lo}..{hi}")

    warnings: list[str] = summary["warnings"]  # type: ignore[assignment]
    if warnings:
        print("\nWarnings:")
        for msg in warnings:
            print(f" - {msg}")
    else:
        print("\nNo warnings.")


def write_summary(summary: dict[str, object], path: Path = Path("/tmp/order_audit.json")) -> str:
    text = json.dumps(summary, indent=2, sort_keys=True)
    path.write_text(text + "\n", encoding="utf-8")
    return text


def main(_argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    seeds = _sample_seeds(config.AUDIT_SAMPLE_SEEDS)
    log.info("Auditing %d seeds", len(seeds))
    summary = audit_orders(seeds)
    print_report(summary)
    write_summary(summary)
    return 2 if summary["warnings"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
