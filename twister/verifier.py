import logging
import os
from typing import Iterable, Iterator

from twister.engine import TwisterEngine
from twister.utils.colors import Colors
from twister.utils.communication import Mismatch, VerificationReport
from twister.utils.encodings import parse_reference_line

logger = logging.getLogger("twister")


class ReferenceVerifier:
    def __init__(self, engine: TwisterEngine, max_mismatches: int = 10):
        self.engine = engine
        self.max_mismatches = max_mismatches

    def log(self, message: str, loglevel=logging.INFO) -> None:
        logger.log(level=loglevel, msg=f"{Colors.LIGHTYELLOW}[Verifier] {Colors.RESET}{message}")

    def verify(self, expected_values: Iterable[int]) -> VerificationReport:
        checked = 0
        mismatch_count = 0
        mismatches = []

        for iteration, expected in enumerate(expected_values):
            actual = self.engine.next()
            checked += 1
            if actual == expected:
                continue

            mismatch_count += 1
            # Keep counting past the cap, only the recorded details are limited
            if len(mismatches) < self.max_mismatches:
                mismatches.append(Mismatch(iteration, expected, actual))
                self.log(
                    f"Iteration {Colors.LIGHTBLUE}{iteration}{Colors.RESET}: "
                    f"expected {Colors.GREEN}{expected}{Colors.RESET}, got {Colors.RED}{actual}{Colors.RESET}",
                    logging.DEBUG,
                )

        return VerificationReport(checked, mismatch_count, mismatches)

    def verify_file(self, path) -> VerificationReport:
        if not os.path.exists(path):
            raise ValueError(f"Reference file {path} does not exist")

        self.log(f"Comparing engine output against {path}")
        with open(path, encoding="utf-8") as reference:
            report = self.verify(self.read_reference_values(reference))

        if report.mismatch_count:
            self.log(
                f"{Colors.RED}{report.mismatch_count} of {report.checked} values differ{Colors.RESET}",
                logging.WARNING,
            )
        else:
            self.log(f"{Colors.GREEN}All {report.checked} values match{Colors.RESET}")
        return report

    @staticmethod
    def read_reference_values(lines: Iterable[str]) -> Iterator[int]:
        for line_number, line in enumerate(lines, start=1):
            try:
                value = parse_reference_line(line)
            except ValueError as e:
                raise ValueError(f"Malformed reference value on line {line_number}: {e}") from e
            if value is not None:
                yield value
