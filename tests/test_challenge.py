import pytest

from petlib.bn import Bn

from dlog_proof.challenge import derive_challenge, encode_pid, encode_sid
from dlog_proof.consts import CHALLENGE_HASH
from dlog_proof.exceptions import InvalidIdentifierError, ZeroChallengeError
from dlog_proof.utils import point_to_bytes
import dlog_proof.challenge


def test_challenge_is_deterministic(group):
    g = group.generator()
    points = [g, 3 * g, 5 * g]
    assert derive_challenge("sid", 1, points) == derive_challenge("sid", 1, points)


def test_challenge_depends_on_point_order(group):
    g = group.generator()
    c1 = derive_challenge("sid", 1, [g, 3 * g, 5 * g])
    c2 = derive_challenge("sid", 1, [g, 5 * g, 3 * g])
    assert c1 != c2


def test_challenge_depends_on_context(group):
    g = group.generator()
    points = [g, 3 * g]
    c = derive_challenge("sid", 1, points)
    assert c != derive_challenge("sid2", 1, points)
    assert c != derive_challenge("sid", 2, points)


def test_challenge_matches_hash_layout(group):
    g = group.generator()
    points = [g, 2 * g, 4 * g]

    hasher = CHALLENGE_HASH()
    hasher.update(b"sid")
    hasher.update(b"\x00\x00\x00\x01")
    for pt in points:
        hasher.update(point_to_bytes(pt))
    expected = Bn.from_binary(hasher.digest()) % group.order()

    assert derive_challenge("sid", 1, points) == expected


def test_challenge_in_range(any_group):
    g = any_group.generator()
    c = derive_challenge("sid", 1, [g], group=any_group)
    assert 0 < c < any_group.order()


def test_str_and_bytes_sid_agree(group):
    g = group.generator()
    assert derive_challenge("sid", 1, [g]) == derive_challenge(b"sid", 1, [g])


def test_zero_challenge_raises(group, monkeypatch):
    class ZeroHash:
        def update(self, data):
            pass

        def digest(self):
            return group.order().binary()

    monkeypatch.setattr(dlog_proof.challenge, "CHALLENGE_HASH", ZeroHash)
    with pytest.raises(ZeroChallengeError):
        derive_challenge("sid", 1, [group.generator()])


def test_encode_pid():
    assert encode_pid(1) == b"\x00\x00\x00\x01"
    assert encode_pid(2 ** 31 - 1) == b"\x7f\xff\xff\xff"
    assert encode_pid(-(2 ** 31)) == b"\x80\x00\x00\x00"


@pytest.mark.parametrize("pid", [2 ** 31, -(2 ** 31) - 1, "1", 1.0, True])
def test_encode_pid_rejects_invalid(pid):
    with pytest.raises(InvalidIdentifierError):
        encode_pid(pid)


def test_encode_sid_rejects_invalid():
    with pytest.raises(InvalidIdentifierError):
        encode_sid(1)
