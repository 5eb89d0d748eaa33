import pytest

from petlib.ec import EcGroup

from dlog_proof.consts import DEFAULT_CURVE_NID


@pytest.fixture
def group():
    return EcGroup(DEFAULT_CURVE_NID)


# secp256k1, NIST P-224, NIST P-256, NIST P-384
@pytest.fixture(params=[714, 713, 415, 715])
def any_group(request):
    return EcGroup(request.param)
