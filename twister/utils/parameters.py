from collections import namedtuple

DEFAULT_SEED = 5489

# Fixed scalar seed applied before mixing in a sequence key
SEQUENCE_INITIAL_SEED = 19650218

ParameterSet = namedtuple(
    "ParameterSet",
    ["w", "n", "m", "r", "a", "u", "d", "s", "b", "t", "c", "l", "f", "f1", "f2"],
)


class ConfigurationError(ValueError):
    pass


# MT19937
MT19937 = ParameterSet(
    w=32,
    n=624,
    m=397,
    r=31,
    a=0x9908B0DF,
    u=11,
    d=0xFFFFFFFF,
    s=7,
    b=0x9D2C5680,
    t=15,
    c=0xEFC60000,
    l=18,
    f=1812433253,
    f1=1664525,
    f2=1566083941,
)

# MT19937-64
MT19937_64 = ParameterSet(
    w=64,
    n=312,
    m=156,
    r=31,
    a=0xB5026F5AA96619E9,
    u=29,
    d=0x5555555555555555,
    s=17,
    b=0x71D67FFFEDA60000,
    t=37,
    c=0xFFF7EEE000000000,
    l=43,
    f=6364136223846793005,
    f1=3935559000370003845,
    f2=2862933555777941757,
)

PRESETS = {
    "mt19937": MT19937,
    "mt19937-64": MT19937_64,
}


def get_preset(name: str) -> ParameterSet:
    try:
        return PRESETS[name.lower()]
    except KeyError:
        raise ConfigurationError(f"Unknown preset {name!r}, expected one of {', '.join(PRESETS)}") from None


def word_mask(w: int) -> int:
    return (1 << w) - 1


def validate_parameters(params: ParameterSet) -> ParameterSet:
    """Check the invariants the twist and tempering steps rely on.

    Returns the parameter set unchanged so it can be used inline, raises
    ConfigurationError on the first violated rule.
    """
    for field, value in params._asdict().items():
        # bool is an int subclass but never a meaningful parameter
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigurationError(f"Parameter {field} must be an integer, got {value!r}")

    if params.w < 2:
        raise ConfigurationError(f"Word width w must be at least 2, got {params.w}")
    if not 1 <= params.m < params.n:
        raise ConfigurationError(f"Recurrence offset must satisfy 1 <= m < n, got m={params.m} n={params.n}")
    if not 0 <= params.r < params.w:
        raise ConfigurationError(f"Separation point must satisfy 0 <= r < w, got r={params.r} w={params.w}")

    for field in ("u", "s", "t", "l"):
        shift = getattr(params, field)
        if not 0 <= shift < params.w:
            raise ConfigurationError(f"Tempering shift {field}={shift} out of range [0, {params.w})")

    mask = word_mask(params.w)
    for field in ("a", "d", "b", "c"):
        value = getattr(params, field)
        if not 0 <= value <= mask:
            raise ConfigurationError(f"Parameter {field}={value:#x} is not a {params.w}-bit word")

    for field in ("f", "f1", "f2"):
        if getattr(params, field) < 0:
            raise ConfigurationError(f"Multiplier {field} must be non-negative")

    return params
