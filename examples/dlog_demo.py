"""
Prove and verify knowledge of a discrete logarithm on secp256k1:
PK{ x: y = x * g }
bound to session "sid" and participant 1.
"""

import time

from petlib.ec import EcGroup

from dlog_proof import DLogProof

sid = "sid"
pid = 1

group = EcGroup(714)
base_point = group.generator()

# The secret and its public point.
x = group.order().random()
y = x * base_point

start_proof = time.perf_counter()
nizk = DLogProof.prove(sid, pid, x, y, base_point)
print("Proof computation time: {} ms".format(int((time.perf_counter() - start_proof) * 1000)))

t_x, t_y = nizk.t.get_affine()
print("t: ({}, {})".format(t_x.hex(), t_y.hex()))
print("s: {}".format(nizk.s.hex()))

start_verify = time.perf_counter()
result = nizk.verify(sid, pid, y, base_point)
print("Verify computation time: {} ms".format(int((time.perf_counter() - start_verify) * 1000)))

if result:
    print("DLOG proof is correct")
else:
    print("DLOG proof is not correct")
