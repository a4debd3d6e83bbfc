"""
utils.py - Module to hold small counting and arithmetic helpers.
"""
from typing import Any, MutableMapping


def increment(counter: MutableMapping[Any, int], key: Any):
    """Add one to the count of key, starting from zero."""
    counter[key] = counter.get(key, 0) + 1


def decrement(counter: MutableMapping[Any, int], key: Any) -> bool:
    """Remove one from the count of key, dropping the key once it reaches zero.

    Args:
        counter (MutableMapping[Any, int]): the counts to update.
        key (Any): the key to decrement.

    Returns:
        bool: False if key was not counted at all, True otherwise.
    """
    count = counter.get(key)
    if count is None:
        return False
    if count > 1:
        counter[key] = count - 1
    else:
        del counter[key]
    return True


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm; unlike math.gcd the sign follows the inputs."""
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple, computed as a // gcd(a, b) * b."""
    return a // gcd(a, b) * b


def sqr(x):
    """Square of x."""
    return x * x
