#!/usr/bin/env python3

# Copyright (C) The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic Curve Digital Signature Algorithm (ECDSA).

Implementation according to SEC 1 v.2:

http://www.secg.org/sec1-v2.pdf

with SHA-256 as message digest (the full 256-bit digest
is used as message representative) and random ephemeral keys.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass

from dataclasses_json import DataClassJsonMixin

from eclib.alias import Integer, String
from eclib.ecc.curve import Curve, KeyPair, secp256k1
from eclib.ecc.curve_group import mult_aff
from eclib.ecc.number_theory import mod_inv
from eclib.ecc.point import Point, hex_field
from eclib.exceptions import EClibRuntimeError, EClibTypeError, EClibValueError
from eclib.hashes import int_from_msg
from eclib.utils import int_from_integer, int_repr

logger = logging.getLogger(__name__)

# the probability of a degenerate signature (r = 0 or s = 0) is about 2/n:
# this bound is never reached with a prime order subgroup of any size
MAX_SIGN_ATTEMPTS = 256


@dataclass(frozen=True)
class Sig(DataClassJsonMixin):
    """ECDSA signature.

    The (r, s) scalars are not checked at construction:
    they are checked against the curve order at verification.
    """

    # scalar, 0 < r < ec.n (ec.n is the curve order)
    r: int = hex_field()
    # scalar, 0 < s < ec.n (ec.n is the curve order)
    s: int = hex_field()

    def assert_valid(self, ec: Curve = secp256k1) -> None:
        # r is a scalar, fail if r is not in [1, n-1]
        if not 0 < self.r < ec.n:
            raise EClibValueError(f"scalar r not in 1..n-1: {int_repr(self.r)}")

        # s is a scalar, fail if s is not in [1, n-1]
        if not 0 < self.s < ec.n:
            raise EClibValueError(f"scalar s not in 1..n-1: {int_repr(self.s)}")


def _int_from_prv_key(prv_key: Integer, ec: Curve) -> int:
    q = int_from_integer(prv_key)
    if not 0 < q < ec.n:
        raise EClibValueError(f"private key not in 1..n-1: {int_repr(q)}")
    return q


def gen_keys(prv_key: Integer | None = None, ec: Curve = secp256k1) -> KeyPair:
    """Return a private/public key pair.

    If the private key is not provided, a random one is generated.
    """
    if prv_key is None:
        return ec.generate_key_pair()

    q = _int_from_prv_key(prv_key, ec)
    return KeyPair(q, mult_aff(q, ec.G, ec))


def challenge(msg: String) -> int:
    "Return the message representative, i.e. SHA256(msg) as int."
    return int_from_msg(msg)


def _sign_(e: int, q: int, nonce: int, ec: Curve) -> Sig:
    # Private function for testing purposes: it allows to explore all
    # possible value of the challenge e (for low-cardinality curves).
    # It assume that q and nonce are in [1, n-1]
    # Steps numbering follows SEC 1 v.2 section 4.1.3
    K = mult_aff(nonce, ec.G, ec)  # 1

    # mod n makes the affine x_K-coordinate a scalar
    r = K.x % ec.n  # 2, 3
    if r == 0:  # r≠0 required as it multiplies the public key
        raise EClibRuntimeError("failed to sign: r = 0")

    s = mod_inv(nonce, ec.n) * (e + r * q) % ec.n  # 6
    if s == 0:  # s≠0 required as verify will need the inverse of s
        raise EClibRuntimeError("failed to sign: s = 0")

    return Sig(r, s)


def sign(
    msg: String,
    prv_key: Integer,
    nonce: Integer | None = None,
    ec: Curve = secp256k1,
) -> Sig:
    """ECDSA signature of a message.

    The message msg is first processed by SHA-256:
    the resulting 256-bit integer is the message representative.

    The ephemeral key (nonce) is uniformly drawn in [1, n-1]:
    if it results in a degenerate signature (r = 0 or s = 0),
    a fresh one is drawn.
    If the nonce is provided, a degenerate signature is an Error.
    """

    # the secret key q: an integer in the range 1..n-1.
    # SEC 1 v.2 section 3.2.1
    q = _int_from_prv_key(prv_key, ec)

    e = challenge(msg)  # 4, 5

    if nonce is not None:
        k = int_from_integer(nonce)
        if not 0 < k < ec.n:
            raise EClibValueError(f"nonce not in 1..n-1: {int_repr(k)}")
        return _sign_(e, q, k, ec)

    for attempt in range(MAX_SIGN_ATTEMPTS):
        k = 1 + secrets.randbelow(ec.n - 1)  # 1
        try:
            return _sign_(e, q, k, ec)
        except EClibRuntimeError as err:
            logger.debug("signing attempt %d: %s", attempt + 1, err)

    raise EClibRuntimeError(f"failed to sign after {MAX_SIGN_ATTEMPTS} attempts")


def _assert_as_valid_(e: int, Q: Point, r: int, s: int, ec: Curve) -> None:
    # Private function for test/dev purposes
    # Steps numbering follows SEC 1 v.2 section 4.1.4

    w = mod_inv(s, ec.n)
    u = e * w % ec.n
    v = r * w % ec.n  # 4
    # Let K = u*G + v*Q.
    K = ec.add(mult_aff(u, ec.G, ec), mult_aff(v, Q, ec))  # 5

    # Fail if infinite(K).
    if K.is_infinity:  # 5
        raise EClibRuntimeError("invalid (INF) key")

    # Fail if r ≠ x_K %n.
    if r != K.x % ec.n:  # 6, 7, 8
        raise EClibRuntimeError("signature verification failed")


def assert_as_valid(msg: String, Q: Point, sig: Sig, ec: Curve = secp256k1) -> None:
    """ECDSA signature verification (SEC 1 v.2 section 4.1.4).

    It raises Errors, while verify should always return True or False.
    """

    if not isinstance(sig, Sig):
        raise EClibTypeError("not a signature")
    if not isinstance(Q, Point):
        raise EClibTypeError("not a point")
    # the public key must be a valid point of the prime order subgroup
    if Q.is_infinity or not ec.contains(Q):
        raise EClibValueError(f"not a valid public key: {Q!r}")
    if not mult_aff(ec.n, Q, ec).is_infinity:
        raise EClibValueError(f"public key not in the curve subgroup: {Q!r}")
    sig.assert_valid(ec)  # 1

    e = challenge(msg)  # 2, 3
    _assert_as_valid_(e, Q, sig.r, sig.s, ec)


def verify(msg: String, Q: Point, sig: Sig, ec: Curve = secp256k1) -> bool:
    """ECDSA signature verification (SEC 1 v.2 section 4.1.4).

    An invalid signature is an ordinary outcome:
    False is returned, no Exception is ever raised.
    """
    # all kind of Exceptions are catched because
    # verify must always return a bool
    try:
        assert_as_valid(msg, Q, sig, ec)
    except Exception:  # pylint: disable=broad-except
        return False

    return True
