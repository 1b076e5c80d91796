"""Finding every occurrence of a pattern in a text."""


def naive_search(text: str, pattern: str) -> list[int]:
    """Return every index at which ``pattern`` starts in ``text``, by brute force."""
    found = []
    for i in range(len(text) - len(pattern) + 1):
        if all(text[i + j] == ch for j, ch in enumerate(pattern)):
            found.append(i)
    return found


def rabin_karp_search(text: str, pattern: str, radix: int = 256, prime: int = 29) -> list[int]:
    """Return every index at which ``pattern`` starts in ``text``, using rolling hashes.

    ``radix`` is the base of the hash and ``prime`` its modulus; windows whose
    hash matches are confirmed character by character. Raises ValueError for a
    modulus that is not positive.
    """
    if prime <= 0:
        raise ValueError("the hash modulus must be positive")
    n, m = len(text), len(pattern)
    if m == 0:
        return list(range(n + 1))
    if m > n:
        return []
    high_weight = pow(radix, m - 1, prime)
    hash_p = hash_s = 0
    for k in range(m):
        hash_p = (radix * hash_p + ord(pattern[k])) % prime
        hash_s = (radix * hash_s + ord(text[k])) % prime
    found = []
    for i in range(n - m + 1):
        if hash_p == hash_s and text[i:i + m] == pattern:
            found.append(i)
        if i < n - m:
            hash_s = (radix * (hash_s - ord(text[i]) * high_weight) + ord(text[i + m])) % prime
    return found