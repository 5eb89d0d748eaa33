import math
import secrets
import hashlib

from petlib.bn import Bn
from petlib.ec import POINT_CONVERSION_UNCOMPRESSED

from dlog_proof.consts import DEFAULT_GROUP


def get_random_point(group=None, random_bits=256, seed=None):
    """
    Generate a random group element with unknown discrete logarithm.

    Args:
        group: Group
        random_bits: Number of bits of a random string to create a point.
        seed: Optional integer making the point reproducible.

    >>> from petlib.ec import EcPt
    >>> a = get_random_point()
    >>> b = get_random_point()
    >>> isinstance(a, EcPt)
    True
    >>> a != b
    True
    >>> get_random_point(seed=1) == get_random_point(seed=1)
    True
    """
    if group is None:
        group = DEFAULT_GROUP

    num_bytes = math.ceil(random_bits / 8)
    if seed is None:
        randomness = secrets.token_bytes(num_bytes)
    else:
        randomness = hashlib.sha512(b"%i" % seed).digest()[:num_bytes]

    return group.hash_to_point(randomness)


def ensure_bn(x):
    """
    Ensure that value is big number.

    >>> isinstance(ensure_bn(42), Bn)
    True
    >>> isinstance(ensure_bn(Bn(42)), Bn)
    True
    """
    if isinstance(x, Bn):
        return x
    else:
        return Bn(x)


def scalar_size(group):
    """
    Number of bytes in a fixed-width encoding of a scalar of the group.

    >>> scalar_size(DEFAULT_GROUP)
    32
    """
    return (group.order().num_bits() + 7) // 8


def scalar_to_bytes(s, group=None):
    """
    Encode a scalar as a fixed-width big-endian byte string.

    >>> scalar_to_bytes(Bn(258))[-2:]
    b'\\x01\\x02'
    >>> len(scalar_to_bytes(Bn(0)))
    32
    """
    if group is None:
        group = DEFAULT_GROUP
    s = ensure_bn(s) % group.order()
    return s.binary().rjust(scalar_size(group), b"\x00")


def point_to_bytes(pt):
    """
    Canonical uncompressed encoding of a point.

    >>> len(point_to_bytes(DEFAULT_GROUP.generator()))
    65
    """
    return pt.export(POINT_CONVERSION_UNCOMPRESSED)
