#!/usr/bin/env python
from bgw import algos
from bgw.randomness import SeededRandomness
import time
import argparse
import numpy as np
import csv

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="run benchmarks for a single broadcast channel")
    parser.add_argument('-n','--participants',
        type=int,
        required=False,
        default=100,
        dest='n',
        help='number of participants of the channel')
    parser.add_argument('-s','--subset-size',
        type=int,
        required=False,
        default=-1,
        dest='subset_size',
        help='size of each recipient set; must be <=n. Default is n/10 (at least 1).')
    parser.add_argument('-i','--iters',
        type=int,
        required=False,
        default=10,
        dest='iters',
        help='iterations of encrypt/decrypt to do (for a single setup)')
    parser.add_argument('--seed',
        type=int,
        required=False,
        default=None,
        dest='seed',
        help='seed the scalar source (reproducible runs, insecure keys)')
    args = parser.parse_args()
    if args.subset_size == -1:
        args.subset_size = max(1, args.n // 10)
    if args.subset_size > args.n:
        print("selected subset size ({}) is greater than number of participants ({})!".format(args.subset_size, args.n))
        exit(0)
    if args.iters < 1:
        print("number of iterations must be at least 1, got {}!".format(args.iters))
        exit(0)
    rng = SeededRandomness(args.seed) if args.seed is not None else None
    if args.seed is not None:
        np.random.seed(args.seed)

    ## Setup ###
    setup_time = time.time()
    channel, recipients = algos.setup(args.n, rng=rng)
    setup_time = time.time()-setup_time
    print("Setup (s):\t", setup_time)
    print("--------------------------")

    prefix = 'bench{}_'.format(args.n)
    f_setup = open(prefix+'setup.csv', 'w')
    f_enc = open(prefix+'enc.csv', 'w')
    f_dec = open(prefix+'dec.csv', 'w')
    writer_setup = csv.writer(f_setup)
    writer_enc = csv.writer(f_enc)
    writer_dec = csv.writer(f_dec)
    writer_setup.writerow(['Setup'])
    writer_setup.writerow([setup_time])
    writer_enc.writerow(['Enc'])
    writer_dec.writerow(['Dec'])
    time_avgs = {
        "Enc": 0,
        "Dec": 0,
    }

    for i in range(args.iters):
        # random recipient set, and one member of it to decrypt
        subset = (np.random.permutation(range(args.n))[:args.subset_size] + 1).tolist()
        member = subset[np.random.randint(len(subset))]

        enc_time = time.time()
        ct0, ct1, key = algos.encrypt(channel, subset, rng=rng)
        enc_time = time.time()-enc_time
        writer_enc.writerow([enc_time])
        time_avgs["Enc"] += enc_time

        dec_time = time.time()
        key_prime = algos.decrypt(recipients[member-1], subset, channel, ct0, ct1)
        dec_time = time.time()-dec_time
        writer_dec.writerow([dec_time])
        time_avgs["Dec"] += dec_time

        # ensure correctness
        assert(key == key_prime)

    f_setup.close()
    f_enc.close()
    f_dec.close()

    time_avgs["Enc"] /= args.iters
    time_avgs["Dec"] /= args.iters

    print("\nAverage Times (s)")
    print("--------------------------")
    for op in time_avgs.keys():
        print("{}:\t{}\t(avg of {}, |S| = {})".format(op,time_avgs[op],args.iters,args.subset_size))
