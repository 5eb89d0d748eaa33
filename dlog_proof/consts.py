"""
Library-wide constants.
"""

from hashlib import sha256

from petlib.ec import EcGroup

# secp256k1
DEFAULT_CURVE_NID = 714
DEFAULT_GROUP = EcGroup(DEFAULT_CURVE_NID)

CHALLENGE_HASH = sha256

# Participant identifiers are signed 32-bit integers, hashed big-endian.
PID_FORMAT = ">i"
PID_MIN = -(2 ** 31)
PID_MAX = 2 ** 31 - 1
