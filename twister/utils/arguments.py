import argparse
import logging

from twister.engine import TwisterEngine
from twister.utils.encodings import key_from_int, parse_int
from twister.utils.parameters import PRESETS

logger = logging.getLogger("twister")


def int_argument(text: str) -> int:
    try:
        return parse_int(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def add_engine_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-p",
        "--preset",
        help="Parameter preset to generate with (default mt19937).",
        choices=list(PRESETS),
        default="mt19937",
    )

    seeding = parser.add_mutually_exclusive_group()
    seeding.add_argument(
        "-s",
        "--seed",
        help="Scalar seed. Without any seed option the default seed 5489 is used.",
        type=int_argument,
    )
    seeding.add_argument(
        "-k",
        "--key",
        help="Word of a sequence seed. Parameter can be passed multiple times.",
        action="append",
        dest="key",
        type=int_argument,
    )
    seeding.add_argument(
        "--key-int",
        help="Sequence seed from an arbitrarily large integer, split into 32-bit words like random.seed().",
        dest="key_int",
        type=int_argument,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        help="Set logging level to debug",
        action="store_const",
        dest="loglevel",
        const=logging.DEBUG,
        default=logging.INFO,
    )


def engine_from_arguments(args: argparse.Namespace) -> TwisterEngine:
    engine = TwisterEngine.from_preset(args.preset)

    if args.seed is not None:
        engine.init_from_scalar(args.seed)
    elif args.key is not None:
        engine.init_from_sequence(args.key)
    elif args.key_int is not None:
        engine.init_from_sequence(key_from_int(args.key_int))
    else:
        logger.debug("No seed given, the engine seeds itself lazily")

    return engine
