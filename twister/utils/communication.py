from collections import namedtuple

EngineSnapshot = namedtuple("EngineSnapshot", ["words", "index"])
Mismatch = namedtuple("Mismatch", ["iteration", "expected", "actual"])
VerificationReport = namedtuple("VerificationReport", ["checked", "mismatch_count", "mismatches"])


class ExitCodes:
    MATCH = 0
    MISMATCH = 1
