#!/usr/bin/env python

"""Print parameter sizes for channels of increasing size.

Outputs:
- sizes of elements of G1, G2, GT, and scalar
- size of the public parameters and of one key pair
- size of the header (constant in n and in the recipient set)
"""

from petrelic.multiplicative.pairing import G1,G2,GT,G1Element,G2Element,GTElement
from bgw import algos

def print_element_sizes():
    print("G1 element size:\t",len(G1Element.to_binary(G1.generator()**G1.order().random())))
    print("G2 element size:\t",len(G2Element.to_binary(G2.generator()**G2.order().random())))
    print("GT element size:\t",len(GTElement.to_binary(GT.generator()**GT.order().random())))
    print("Scalar size:\t\t",len(G1.order().random().binary()))

def print_key_pair_size(recipient):
    pk = len(G2Element.to_binary(recipient.public_key))
    sk = len(G1Element.to_binary(recipient.private_key))
    print("key pair size:\t\t",pk+sk,"\t(pk {}, sk {})".format(pk,sk))

def print_header_size(channel, recipients):
    ct0, ct1, key = algos.encrypt(channel, recipients)
    size = len(G1Element.to_binary(ct0)) + len(G2Element.to_binary(ct1))
    print("header size (|S| = {}):\t".format(len(recipients)),size)

if __name__ == "__main__":
    print_element_sizes()

    n_arr = [10, 100, 1000]
    for n in n_arr:
        channel, recipients = algos.setup(n)

        print("\nn = {}".format(n))
        print("pp size:\t\t",channel.get_size())
        print_key_pair_size(recipients[0])
        print_header_size(channel, [1])
        print_header_size(channel, range(1, n+1))
