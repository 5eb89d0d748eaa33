r"""
Fiat-Shamir challenge derivation.

The challenge binds a session identifier, a participant identifier and an
ordered list of points:

.. math::
    c = H(sid \| pid \| P_0 \| ... \| P_n) \mod q

where :math:`H` is SHA-256, :math:`pid` is encoded as a big-endian signed 32-bit integer, every
:math:`P_i` is encoded uncompressed, and :math:`q` is the group order.
"""

import logging
import struct

from petlib.bn import Bn

from dlog_proof.consts import CHALLENGE_HASH, DEFAULT_GROUP
from dlog_proof.consts import PID_FORMAT, PID_MIN, PID_MAX
from dlog_proof.exceptions import InvalidIdentifierError, ZeroChallengeError
from dlog_proof.utils import point_to_bytes


logger = logging.getLogger(__name__)


def encode_sid(sid):
    """
    Encode a session identifier.

    >>> encode_sid("sid")
    b'sid'
    >>> encode_sid(b"raw")
    b'raw'
    """
    if isinstance(sid, str):
        return sid.encode("utf8")
    if isinstance(sid, bytes):
        return sid
    raise InvalidIdentifierError(
        "Session identifier must be str or bytes. Got: {}".format(type(sid))
    )


def encode_pid(pid):
    """
    Encode a participant identifier as a big-endian signed 32-bit integer.

    >>> encode_pid(1)
    b'\\x00\\x00\\x00\\x01'
    >>> encode_pid(-1)
    b'\\xff\\xff\\xff\\xff'
    """
    if isinstance(pid, bool) or not isinstance(pid, int):
        raise InvalidIdentifierError(
            "Participant identifier must be an int. Got: {}".format(type(pid))
        )
    if not PID_MIN <= pid <= PID_MAX:
        raise InvalidIdentifierError(
            "Participant identifier {} does not fit in 32 bits".format(pid)
        )
    return struct.pack(PID_FORMAT, pid)


def derive_challenge(sid, pid, points, group=None):
    """
    Derive a non-zero challenge scalar from the proof context and transcript points.

    The order of ``points`` is significant. Identical inputs always produce the same challenge.

    >>> g = DEFAULT_GROUP.generator()
    >>> c = derive_challenge("sid", 1, [g, 2 * g])
    >>> isinstance(c, Bn)
    True
    >>> c == derive_challenge("sid", 1, [g, 2 * g])
    True
    >>> c == derive_challenge("sid", 1, [2 * g, g])
    False

    Args:
        sid: Session identifier, ``str`` (hashed as UTF-8) or ``bytes``.
        pid (int): Participant identifier, a signed 32-bit integer.
        points: Ordered sequence of points.
        group: Group whose order the digest is reduced by. Defaults to the group of the first
            point.

    Returns:
        Bn: Challenge in :math:`[1, q)`.

    Raises:
        ZeroChallengeError: If the digest reduces to zero.
    """
    points = list(points)
    if group is None:
        group = points[0].group if points else DEFAULT_GROUP

    hasher = CHALLENGE_HASH()
    hasher.update(encode_sid(sid))
    hasher.update(encode_pid(pid))
    for pt in points:
        hasher.update(point_to_bytes(pt))

    challenge = Bn.from_binary(hasher.digest()) % group.order()
    if challenge == 0:
        logger.error("Challenge for session %r, participant %d is zero", sid, pid)
        raise ZeroChallengeError(
            "Hash of session {!r}, participant {} reduced to zero".format(sid, pid)
        )
    return challenge
