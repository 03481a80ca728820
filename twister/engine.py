import logging
from typing import Iterable

from twister.utils.colors import Colors
from twister.utils.communication import EngineSnapshot
from twister.utils.parameters import (
    DEFAULT_SEED,
    MT19937,
    MT19937_64,
    SEQUENCE_INITIAL_SEED,
    ParameterSet,
    get_preset,
    validate_parameters,
    word_mask,
)

logger = logging.getLogger("twister")


class TwisterEngine:
    """Mersenne Twister generator for an arbitrary parameter set.

    The same twist/temper logic drives MT19937, MT19937-64 and any custom
    width. Words are plain Python ints, masked back to w bits after every
    operation that can widen them.
    """

    def __init__(self, parameters: ParameterSet):
        self.parameters = validate_parameters(parameters)

        self.word_mask = word_mask(parameters.w)
        # Least significant r bits / most significant w - r bits
        self.lower_mask = (1 << parameters.r) - 1
        self.upper_mask = self.word_mask & ~self.lower_mask

        # None until seeded, either explicitly or lazily by the first next()
        self.state = None
        self.index = parameters.n

    @classmethod
    def mt19937(cls) -> "TwisterEngine":
        return cls(MT19937)

    @classmethod
    def mt19937_64(cls) -> "TwisterEngine":
        return cls(MT19937_64)

    @classmethod
    def from_preset(cls, name: str) -> "TwisterEngine":
        return cls(get_preset(name))

    @property
    def max(self) -> int:
        """Inclusive upper bound of every generated word"""
        return self.word_mask

    def log(self, message: str, loglevel=logging.INFO) -> None:
        logger.log(level=loglevel, msg=f"{Colors.CYAN}[ENGINE w={self.parameters.w}] {Colors.RESET}{message}")

    def init_from_scalar(self, seed: int) -> None:
        """Initialize the state vector from a single integer"""
        p = self.parameters
        shift = p.w - 2

        state = [0] * p.n
        state[0] = seed & self.word_mask
        for i in range(1, p.n):
            # Knuth TAOCP Vol2. 3rd Ed. P.106 multiplier
            previous = state[i - 1]
            state[i] = (p.f * (previous ^ (previous >> shift)) + i) & self.word_mask

        self.state = state
        self.index = p.n
        self.log(f"Seeded from scalar {seed}", loglevel=logging.DEBUG)

    def init_from_sequence(self, key: Iterable[int]) -> None:
        """Initialize the state vector from a sequence of integers.

        The key is reused cyclically; an empty key mixes in zeros only.
        """
        key = list(key)
        p = self.parameters
        n = p.n
        shift = p.w - 2
        mask = self.word_mask

        self.init_from_scalar(SEQUENCE_INITIAL_SEED)
        state = self.state

        i = 1
        j = 0
        for _ in range(max(n, len(key))):
            previous = state[i - 1]
            word = key[j] if key else 0
            state[i] = ((state[i] ^ ((previous ^ (previous >> shift)) * p.f1)) + word + j) & mask
            i += 1
            j += 1
            if i >= n:
                state[0] = state[n - 1]
                i = 1
            if j >= len(key):
                j = 0

        for _ in range(n - 1):
            previous = state[i - 1]
            state[i] = ((state[i] ^ ((previous ^ (previous >> shift)) * p.f2)) - i) & mask
            i += 1
            if i >= n:
                state[0] = state[n - 1]
                i = 1

        # MSB set so the initial vector is never all zero
        state[0] = 1 << (p.w - 1)
        self.log(f"Seeded from sequence of {len(key)} words", loglevel=logging.DEBUG)

    def twist(self) -> None:
        """Regenerate all n words of the state vector"""
        p = self.parameters
        n, m, a = p.n, p.m, p.a
        upper_mask, lower_mask = self.upper_mask, self.lower_mask
        state = self.state

        for i in range(n - m):
            x = (state[i] & upper_mask) | (state[i + 1] & lower_mask)
            state[i] = state[i + m] ^ (x >> 1) ^ ((x & 1) * a)

        for i in range(n - m, n - 1):
            x = (state[i] & upper_mask) | (state[i + 1] & lower_mask)
            state[i] = state[i + m - n] ^ (x >> 1) ^ ((x & 1) * a)

        x = (state[n - 1] & upper_mask) | (state[0] & lower_mask)
        state[n - 1] = state[m - 1] ^ (x >> 1) ^ ((x & 1) * a)

        self.index = 0

    def temper(self, y: int) -> int:
        p = self.parameters
        mask = self.word_mask

        y = y ^ ((y >> p.u) & p.d)
        y = y ^ (((y << p.s) & mask) & p.b)
        y = y ^ (((y << p.t) & mask) & p.c)
        y = y ^ (y >> p.l)

        return y & mask

    def next(self) -> int:
        """Extract the next tempered word, calling twist() every n words"""
        if self.state is None:
            self.log(f"Not seeded, falling back to default seed {DEFAULT_SEED}", loglevel=logging.DEBUG)
            self.init_from_scalar(DEFAULT_SEED)

        if self.index >= self.parameters.n:
            self.twist()

        y = self.state[self.index]
        self.index += 1

        return self.temper(y)

    def generate(self, count: int) -> list[int]:
        return [self.next() for _ in range(count)]

    def snapshot(self) -> EngineSnapshot | None:
        if self.state is None:
            return None
        return EngineSnapshot(tuple(self.state), self.index)

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self.next()
