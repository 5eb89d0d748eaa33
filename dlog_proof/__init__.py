__version__ = "0.1.0"
__title__ = "dlog-proof"
__author__ = "dlog-proof contributors"
__email__ = "dlog-proof@users.noreply.github.com"
__url__ = "https://github.com/dlog-proof/dlog-proof"
__license__ = "MIT"
__description__ = "Non-interactive Schnorr proofs of knowledge of a discrete logarithm over elliptic curves."
__copyright__ = "2026, dlog-proof contributors"


from dlog_proof.challenge import derive_challenge
from dlog_proof.proof import DLogProof, prove, verify
