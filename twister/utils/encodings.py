FORMAT_DECIMAL = "decimal"
FORMAT_HEX = "hex"
OUTPUT_FORMATS = (FORMAT_DECIMAL, FORMAT_HEX)

COMMENT_PREFIX = "#"


def parse_int(text: str) -> int:
    # Accepts decimal as well as 0x / 0o / 0b prefixed literals, and '_' separators
    try:
        return int(text.strip(), 0)
    except ValueError:
        raise ValueError(f"Could not parse {text!r} as an integer") from None


def parse_reference_line(line: str) -> int | None:
    # Blank lines and comments carry no expected value
    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIX):
        return None
    return parse_int(stripped)


def format_word(value: int, width: int, style: str = FORMAT_DECIMAL) -> str:
    if style == FORMAT_DECIMAL:
        return str(value)
    if style == FORMAT_HEX:
        # Pad to the full word width so columns line up
        digits = (width + 3) // 4
        return f"0x{value:0{digits}x}"
    raise ValueError(f"Unknown output format {style!r}")


def key_from_int(value: int, word_bits: int = 32) -> list[int]:
    """Split an arbitrarily large integer into a sequence-seeding key.

    Words are taken least significant first from abs(value). Zero yields a
    single zero word. This is how CPython's random.seed() turns an int into
    an init_by_array key, so the resulting stream matches random.getrandbits(32).
    """
    if word_bits < 1:
        raise ValueError(f"Word size must be positive, got {word_bits}")

    value = abs(value)
    mask = (1 << word_bits) - 1
    key = []
    while True:
        value, word = value >> word_bits, value & mask
        key.append(word)

        # Equivalent of do-while loop: stop once every significant word was taken
        if value <= 0:
            break

    return key
