import argparse
import logging
import sys

from twister.utils.arguments import add_engine_arguments, engine_from_arguments
from twister.utils.communication import ExitCodes
from twister.verifier import ReferenceVerifier


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Compare Mersenne Twister output against a reference file")
    add_engine_arguments(parser)
    parser.add_argument(
        "-f",
        "--file",
        help="Reference file with one expected value per line.",
        dest="filename",
        required=True,
    )
    parser.add_argument(
        "--max-mismatches",
        help="Number of differing values to report in detail (default 10).",
        default=10,
        type=int,
    )

    args = parser.parse_args(argv)
    logging.basicConfig(format="%(asctime)s : %(message)s", datefmt="%H:%M:%S", level=args.loglevel)

    engine = engine_from_arguments(args)
    verifier = ReferenceVerifier(engine, max_mismatches=args.max_mismatches)
    report = verifier.verify_file(args.filename)

    for mismatch in report.mismatches:
        logging.info(f"iteration {mismatch.iteration}: expected {mismatch.expected}, got {mismatch.actual}")

    if report.mismatch_count:
        return ExitCodes.MISMATCH
    return ExitCodes.MATCH


if __name__ == "__main__":
    sys.exit(main())
