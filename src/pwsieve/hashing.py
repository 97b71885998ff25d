"""Hash algorithms used to detect digests of dictionary words."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from cryptography.hazmat.primitives import hashes

HexDigest = Callable[[bytes], str]


@dataclass(frozen=True)
class HashAlgorithm:
    """A named function mapping bytes to a lowercase hex digest."""

    name: str
    digest: HexDigest

    def hexdigest(self, value: str) -> str:
        # Lone surrogates (undecodable input from the terminal) still hash.
        return self.digest(value.encode("utf-8", errors="surrogatepass")).lower()


def _cryptography_digest(algorithm: type[hashes.HashAlgorithm]) -> HexDigest:
    def _digest(data: bytes) -> str:
        hasher = hashes.Hash(algorithm())
        hasher.update(data)
        return hasher.finalize().hex()

    return _digest


MD5 = HashAlgorithm("md5", _cryptography_digest(hashes.MD5))
SHA1 = HashAlgorithm("sha1", _cryptography_digest(hashes.SHA1))
SHA224 = HashAlgorithm("sha224", _cryptography_digest(hashes.SHA224))
SHA256 = HashAlgorithm("sha256", _cryptography_digest(hashes.SHA256))
SHA384 = HashAlgorithm("sha384", _cryptography_digest(hashes.SHA384))
SHA512 = HashAlgorithm("sha512", _cryptography_digest(hashes.SHA512))
SHA3_256 = HashAlgorithm("sha3_256", _cryptography_digest(hashes.SHA3_256))
SHA3_512 = HashAlgorithm("sha3_512", _cryptography_digest(hashes.SHA3_512))

BUILTIN_ALGORITHMS: dict[str, HashAlgorithm] = {
    algo.name: algo for algo in (MD5, SHA1, SHA224, SHA256, SHA384, SHA512, SHA3_256, SHA3_512)
}

# The set checked by recommended_options(); matches the digests most often
# pasted into password fields.
COMMON_ALGORITHMS: tuple[HashAlgorithm, ...] = (MD5, SHA1, SHA256, SHA512)


def get_algorithm(name: str) -> HashAlgorithm:
    key = name.strip().lower().replace("-", "_")
    if key in ("sha_1", "sha_224", "sha_256", "sha_384", "sha_512"):
        key = key.replace("_", "")
    try:
        return BUILTIN_ALGORITHMS[key]
    except KeyError:
        known = ", ".join(sorted(BUILTIN_ALGORITHMS))
        raise ValueError(f"Unknown hash algorithm {name!r} (known: {known})") from None


def resolve_algorithms(names: Iterable[str]) -> tuple[HashAlgorithm, ...]:
    """Look up algorithms by name, preserving order and dropping duplicates."""

    resolved: list[HashAlgorithm] = []
    for name in names:
        algo = get_algorithm(name)
        if algo not in resolved:
            resolved.append(algo)
    return tuple(resolved)


def sha1_hex_upper(value: str) -> str:
    """Uppercase SHA-1 hex digest, the format used by the breach range API."""

    return SHA1.hexdigest(value).upper()
