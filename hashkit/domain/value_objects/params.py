"""Hashing parameter sets - immutable value objects, one per algorithm.

Each parameter set validates itself at construction time. A provider holds
exactly one of these for its whole lifetime, so an invalid value must fail
at startup rather than on the first login.
"""

from dataclasses import dataclass

from hashkit.domain.exceptions import InvalidConfigurationError

UINT32_MAX = 2**32 - 1
# hashlib.scrypt takes N as a C unsigned long
SCRYPT_MAX_LOG2_N = 63


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise InvalidConfigurationError(message)


@dataclass(frozen=True)
class Argon2idParams:
    """
    Argon2id cost parameters.

    Defaults are a safe baseline for interactive logins: 64 MiB of memory,
    3 passes and 2 lanes, with a 16 byte salt and a 32 byte digest.

    Attributes:
        memory_kib: Memory cost in KiB (the ``m`` field)
        iterations: Number of passes over memory (the ``t`` field)
        parallelism: Number of lanes (the ``p`` field)
        salt_length: Random salt size in bytes
        key_length: Derived digest size in bytes
    """

    memory_kib: int = 64 * 1024
    iterations: int = 3
    parallelism: int = 2
    salt_length: int = 16
    key_length: int = 32

    def __post_init__(self):
        _require(
            1 <= self.parallelism <= 255,
            f"Argon2id parallelism must be between 1 and 255, got {self.parallelism}",
        )
        _require(
            8 * self.parallelism <= self.memory_kib <= UINT32_MAX,
            f"Argon2id memory must be at least 8 KiB per lane, got {self.memory_kib}",
        )
        _require(
            1 <= self.iterations <= UINT32_MAX,
            f"Argon2id iterations must be positive, got {self.iterations}",
        )
        _require(
            self.salt_length >= 8,
            f"Argon2id salt length must be at least 8 bytes, got {self.salt_length}",
        )
        _require(
            self.key_length >= 4,
            f"Argon2id key length must be at least 4 bytes, got {self.key_length}",
        )


def scrypt_cost_is_valid(n: int, r: int) -> bool:
    """N must be a power of two above 1 and below 2^(16r) (RFC 7914)."""
    if n <= 1 or n & (n - 1):
        return False
    return n.bit_length() - 1 < min(16 * r, SCRYPT_MAX_LOG2_N)


@dataclass(frozen=True)
class ScryptParams:
    """
    Scrypt cost parameters.

    Attributes:
        n: CPU/memory cost, a power of two greater than 1 (the ``N`` field)
        r: Block size (the ``r`` field)
        p: Parallelization (the ``p`` field)
        salt_length: Random salt size in bytes
        key_length: Derived digest size in bytes
    """

    n: int = 1 << 15
    r: int = 8
    p: int = 1
    salt_length: int = 16
    key_length: int = 32

    def __post_init__(self):
        _require(self.r >= 1, f"Scrypt r must be positive, got {self.r}")
        _require(
            scrypt_cost_is_valid(self.n, self.r),
            f"Scrypt N must be a power of two between 2 and 2^{SCRYPT_MAX_LOG2_N - 1} "
            f"and below 2^(16*r), got {self.n}",
        )
        _require(self.p >= 1, f"Scrypt p must be positive, got {self.p}")
        _require(
            self.r * self.p < 2**30,
            f"Scrypt r*p must be below 2^30, got {self.r * self.p}",
        )
        _require(
            self.salt_length >= 8,
            f"Scrypt salt length must be at least 8 bytes, got {self.salt_length}",
        )
        _require(
            self.key_length >= 4,
            f"Scrypt key length must be at least 4 bytes, got {self.key_length}",
        )


def scrypt_max_memory(n: int, r: int, p: int) -> int:
    """Memory ceiling handed to ``hashlib.scrypt`` for the given cost."""
    return min(128 * r * (n + p + 2) + 1024 * 1024, 2**31 - 1)


@dataclass(frozen=True)
class BcryptParams:
    """Bcrypt cost factor (log2 of the number of rounds)."""

    cost: int = 12

    def __post_init__(self):
        _require(
            4 <= self.cost <= 31,
            f"Bcrypt cost must be between 4 and 31, got {self.cost}",
        )
