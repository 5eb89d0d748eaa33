"""
Common exception classes.
"""


class ZeroChallengeError(Exception):
    """Challenge derivation produced the zero scalar."""


class ProofFormatError(Exception):
    """Serialized proof cannot be decoded."""


class InvalidIdentifierError(ValueError):
    """Session or participant identifier cannot be encoded."""
