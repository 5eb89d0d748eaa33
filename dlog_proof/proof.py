r"""
Non-interactive Schnorr proof of knowledge of a discrete logarithm.

Proves :math:`PK\{ x: Y = x B \}` for a public point :math:`Y` and base point :math:`B`, made
non-interactive with the Fiat-Shamir heuristic. The challenge binds a session identifier and a
participant identifier, so a proof only verifies under the context it was produced for:

.. math::
    t = r B, \quad c = H(sid, pid, [B, Y, t]), \quad s = r + x c \mod q

The verifier accepts if :math:`s B = t + c Y`.

A proof does not carry its context. Whoever verifies a proof received out of band must already
know the correct ``(sid, pid)`` pair.

>>> from dlog_proof.consts import DEFAULT_GROUP
>>> g = DEFAULT_GROUP.generator()
>>> x = DEFAULT_GROUP.order().random()
>>> y = x * g
>>> nizk = DLogProof.prove("sid", 1, x, y, g)
>>> nizk.verify("sid", 1, y, g)
True
>>> nizk.verify("sid", 2, y, g)
False
"""

import logging

import attr
from petlib.bn import Bn
from petlib.ec import EcPt

from dlog_proof.challenge import derive_challenge
from dlog_proof.consts import DEFAULT_GROUP
from dlog_proof.exceptions import ProofFormatError
from dlog_proof.utils import ensure_bn, point_to_bytes, scalar_size, scalar_to_bytes


logger = logging.getLogger(__name__)


@attr.s(frozen=True)
class DLogProof:
    r"""
    Non-interactive proof of knowledge of a discrete logarithm.

    Args:
        t: Commitment point :math:`r B`.
        s: Response :math:`r + x c \mod q`.
    """

    t = attr.ib()
    s = attr.ib()

    @classmethod
    def prove(cls, sid, pid, x, y, base_point):
        """
        Construct a proof that ``y = x * base_point``.

        The relation between ``x`` and ``y`` is not checked. A proof for a wrong ``x`` is
        produced normally and fails verification.

        Args:
            sid: Session identifier.
            pid (int): Participant identifier.
            x: Secret discrete logarithm, ``int`` or :py:class:`petlib.bn.Bn`.
            y: Public point.
            base_point: Base point.

        Returns:
            DLogProof: A fresh proof. Every call draws a new nonce.

        Raises:
            ZeroChallengeError: If the challenge reduces to zero.
        """
        group = base_point.group
        order = group.order()

        r = order.random()
        t = r * base_point
        c = derive_challenge(sid, pid, [base_point, y, t], group=group)
        s = (r + ensure_bn(x) * c) % order

        logger.debug("Produced DLog proof for session %r, participant %d", sid, pid)
        return cls(t=t, s=s)

    def verify(self, sid, pid, y, base_point):
        """
        Verify the proof against the given context.

        Args:
            sid: Session identifier the proof is expected to be bound to.
            pid (int): Participant identifier the proof is expected to be bound to.
            y: Public point.
            base_point: Base point.

        Returns:
            bool: True if verification succeeded, False otherwise.
        """
        c = derive_challenge(sid, pid, [base_point, y, self.t], group=base_point.group)
        lhs = self.s * base_point
        rhs = self.t + c * y

        result = lhs == rhs
        logger.debug(
            "DLog proof for session %r, participant %d %s",
            sid,
            pid,
            "verified" if result else "rejected",
        )
        return result

    def to_bytes(self):
        """
        Serialize the proof.

        The encoding is the uncompressed encoding of ``t`` followed by ``s`` as a fixed-width
        big-endian integer.

        >>> from dlog_proof.consts import DEFAULT_GROUP
        >>> g = DEFAULT_GROUP.generator()
        >>> len(DLogProof.prove("sid", 1, 7, 7 * g, g).to_bytes())
        97
        """
        return point_to_bytes(self.t) + scalar_to_bytes(self.s, self.t.group)

    @classmethod
    def from_bytes(cls, data, group=None):
        """
        Deserialize a proof produced by :py:meth:`to_bytes`.

        Args:
            data (bytes): Serialized proof.
            group: Group of the commitment point. Defaults to secp256k1.

        Raises:
            ProofFormatError: If the data has the wrong length or the response is out of range.
        """
        if group is None:
            group = DEFAULT_GROUP

        s_len = scalar_size(group)
        t_len = len(point_to_bytes(group.generator()))
        if len(data) != t_len + s_len:
            raise ProofFormatError(
                "Expected {} bytes, got {}".format(t_len + s_len, len(data))
            )

        t = EcPt.from_binary(data[:t_len], group)
        s = Bn.from_binary(data[t_len:])
        if s >= group.order():
            raise ProofFormatError("Response is not reduced modulo the group order")
        return cls(t=t, s=s)


def prove(sid, pid, x, y, base_point):
    """
    Construct a proof that ``y = x * base_point``.

    See :py:meth:`DLogProof.prove`.
    """
    return DLogProof.prove(sid, pid, x, y, base_point)


def verify(proof, sid, pid, y, base_point):
    """
    Verify ``proof`` against the given context.

    See :py:meth:`DLogProof.verify`.
    """
    return proof.verify(sid, pid, y, base_point)
