#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

from eclib.ecc.curve import secp256k1 as ec
from eclib.ecc.dsa import sign, verify

print("\n*** EC:")
print(ec)

print("\n0. Message to be signed")
msg = "hello, world!"
print(msg)

print("1. Key generation")
key_pair = ec.generate_key_pair()
Q = key_pair.public_key
print(f"prvkey: {hex(key_pair.private_key).upper()}")
print(f"PubKey: {hex(Q.x).upper()} {hex(Q.y).upper()}")

print("2. Sign message")
sig = sign(msg, key_pair.private_key, ec=ec)
print(f"     r: {hex(sig.r).upper()}")
print(f"     s: {hex(sig.s).upper()}")

print("3. Verify signature")
print(verify(msg, Q, sig, ec))

print("\n** Verify signature of another message")
print(verify("hello, world?", Q, sig, ec))
