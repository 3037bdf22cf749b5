#!/usr/bin/env python3
"""Evaluate the function definition classifier against labeled lines.

Each JSONL record holds one source line and whether it starts a definition:
    {"line": "void Widget::paint() const", "is_definition": true}

Usage:
    python scripts/evaluate.py data/sample_lines.jsonl
    python scripts/evaluate.py data/sample_lines.jsonl --verbose
"""

import argparse
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from methodsep import classify


@dataclass
class LineEvaluation:
    """Evaluation result for a single line."""

    line: str
    expected: bool
    predicted: bool

    @property
    def correct(self) -> bool:
        return self.expected == self.predicted


@dataclass
class EvaluationResults:
    """Aggregated evaluation results."""

    true_positives: int = 0
    false_positives: int = 0
    true_negatives: int = 0
    false_negatives: int = 0

    # Misclassified lines for analysis
    failures: list[LineEvaluation] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.true_positives + self.false_positives + self.true_negatives + self.false_negatives

    @property
    def accuracy(self) -> float:
        if self.total == 0:
            return 0.0
        return (self.true_positives + self.true_negatives) / self.total

    @property
    def precision(self) -> float:
        if self.true_positives + self.false_positives == 0:
            return 0.0
        return self.true_positives / (self.true_positives + self.false_positives)

    @property
    def recall(self) -> float:
        if self.true_positives + self.false_negatives == 0:
            return 0.0
        return self.true_positives / (self.true_positives + self.false_negatives)

    @property
    def f1(self) -> float:
        if self.precision + self.recall == 0:
            return 0.0
        return 2 * self.precision * self.recall / (self.precision + self.recall)

    def add(self, evaluation: LineEvaluation) -> None:
        if evaluation.expected and evaluation.predicted:
            self.true_positives += 1
        elif evaluation.predicted:
            self.false_positives += 1
        elif evaluation.expected:
            self.false_negatives += 1
        else:
            self.true_negatives += 1

        if not evaluation.correct:
            self.failures.append(evaluation)


def load_examples(path: Path) -> list[dict]:
    """Load labeled lines from a JSONL file, skipping blank rows."""
    examples = []
    with open(path, encoding="utf-8") as f:
        for line_number, raw in enumerate(f, 1):
            if not raw.strip():
                continue
            try:
                examples.append(json.loads(raw))
            except json.JSONDecodeError as exc:
                raise ValueError(f"{path}:{line_number}: {exc}") from exc
    return examples


def evaluate(examples: list[dict]) -> EvaluationResults:
    """Classify every example and tally the outcome."""
    results = EvaluationResults()
    for example in examples:
        line = example["line"].strip()
        results.add(
            LineEvaluation(
                line=line,
                expected=bool(example["is_definition"]),
                predicted=classify(line),
            )
        )
    return results


def print_report(results: EvaluationResults, verbose: bool) -> None:
    print("=" * 60)
    print("CLASSIFIER EVALUATION")
    print("=" * 60)
    print(f"  Lines:      {results.total}")
    print(f"  Accuracy:   {results.accuracy:.1%}")
    print(f"  Precision:  {results.precision:.1%}")
    print(f"  Recall:     {results.recall:.1%}")
    print(f"  F1:         {results.f1:.3f}")
    print()
    print(f"  TP {results.true_positives}  FP {results.false_positives}  "
          f"TN {results.true_negatives}  FN {results.false_negatives}")

    if results.failures:
        print()
        print(f"MISCLASSIFIED ({len(results.failures)}):")
        shown = results.failures if verbose else results.failures[:20]
        for failure in shown:
            kind = "FP" if failure.predicted else "FN"
            print(f"  {kind}  {failure.line}")
        if len(shown) < len(results.failures):
            print(f"  ... {len(results.failures) - len(shown)} more (use --verbose)")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("test_file", type=Path, help="JSONL file of labeled lines")
    parser.add_argument("--verbose", action="store_true", help="Show every misclassified line")
    args = parser.parse_args()

    results = evaluate(load_examples(args.test_file))
    print_report(results, args.verbose)


if __name__ == "__main__":
    main()
