#!/usr/bin/env python

"""Time the petrelic operations setup, encrypt and decrypt are built from."""

import time
from petrelic.multiplicative.pairing import G1,G2,GT

if __name__ == "__main__":
    # random group elements
    a = G1.generator() ** G1.order().random()
    a2 = G1.generator() ** G1.order().random()
    b = G2.generator() ** G2.order().random()
    c = a.pair(b)
    c2 = a2.pair(b)

    scalar1 = G1.order().random()
    scalar2 = G2.order().random()

    times = {
        "exp in G1": 0.0,       # alpha powers, keys, header
        "exp in G2": 0.0,       # Q powers, g2**k
        "mul in G1": 0.0,       # accumulating P[n+1-i] into the header / key
        "pairing": 0.0,         # session key, decryption
        "inverse in GT": 0.0,   # decryption
        "mul in GT": 0.0,       # decryption
    }

    iters = 100
    print("averaging over {} iterations".format(iters), end="", flush=True)
    for i in range(iters):
        start = time.time()
        a ** scalar1
        times["exp in G1"] += time.time()-start

        start = time.time()
        b ** scalar2
        times["exp in G2"] += time.time()-start

        start = time.time()
        a * a2
        times["mul in G1"] += time.time()-start

        start = time.time()
        a.pair(b)
        times["pairing"] += time.time()-start

        start = time.time()
        c.inverse()
        times["inverse in GT"] += time.time()-start

        start = time.time()
        c * c2
        times["mul in GT"] += time.time()-start

        print(i if i>0 and i%10==0 else ".", end="", flush=True)

    print("\n")
    for op in times.keys():
        print("{}\t{}".format(op.ljust(16), times[op] / iters))
