import argparse
import logging
import sys

from twister.utils.arguments import add_engine_arguments, engine_from_arguments
from twister.utils.colors import Colors
from twister.utils.encodings import FORMAT_DECIMAL, OUTPUT_FORMATS, format_word

logger = logging.getLogger("twister")


def write_words(engine, count: int, style: str, stream) -> None:
    width = engine.parameters.w
    for _ in range(count):
        stream.write(format_word(engine.next(), width, style) + "\n")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate words from a Mersenne Twister engine")
    add_engine_arguments(parser)
    parser.add_argument("-n", "--count", default=10, type=int, help="Number of words to generate (default 10).")
    parser.add_argument(
        "--format",
        help="Output format of the generated words (default decimal).",
        choices=OUTPUT_FORMATS,
        default=FORMAT_DECIMAL,
        dest="style",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="File to write the words to, one per line. Defaults to stdout.",
        dest="filename",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(format="%(asctime)s : %(message)s", datefmt="%H:%M:%S", level=args.loglevel)

    if args.count < 0:
        raise ValueError(f"Count must not be negative, got {args.count}")

    engine = engine_from_arguments(args)
    logger.info(f"Generating {Colors.YELLOW}{args.count}{Colors.RESET} words with preset {args.preset}")

    if args.filename is None:
        write_words(engine, args.count, args.style, sys.stdout)
    else:
        with open(args.filename, "w", encoding="utf-8") as output:
            write_words(engine, args.count, args.style, output)
        logger.info(f"Wrote {args.count} words to {args.filename}")


if __name__ == "__main__":
    main()
