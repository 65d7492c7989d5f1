"""A tiny runner for scripted scenario checks."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Callable, TextIO


@dataclass
class RunReport:
    """Outcome of a run: counts and the failing statuses by name."""

    total: int
    correct: int
    failures: dict[str, int] = field(default_factory=dict)

    @property
    def percentage(self) -> float:
        return self.correct / self.total * 100.0 if self.total else float("nan")


class TestRunner:
    """Runs named checks that return 0 on success or an error count."""

    __test__ = False

    def __init__(self) -> None:
        self.checks: list[tuple[Callable[[], int | None], str]] = []

    def add(self, func: Callable[[], int | None], name: str) -> None:
        self.checks.append((func, name))

    def run(self, out: TextIO | None = None) -> RunReport:
        """Run every check in order, writing progress to ``out``."""
        stream = out if out is not None else sys.stdout
        report = RunReport(total=len(self.checks), correct=0)
        for func, name in self.checks:
            print(f"Corriendo {name}", file=stream)
            status = func() or 0
            if status == 0:
                print("Se corrio de manera correcta ", file=stream)
                report.correct += 1
            else:
                print(f"Errores:{status}", file=stream)
                report.failures[name] = status
        print(f"Testeos ejecutados:{report.total}", file=stream)
        print(
            f"Testeos sin errores: {report.correct}({report.percentage:g} % )",
            file=stream,
        )
        return report