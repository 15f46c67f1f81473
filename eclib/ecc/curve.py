#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve class and functions.

Curve is the cyclic subgroup of prime order n
generated by G: it provides the domain parameters for ECDSA.

The group order n is a trusted input: it is checked (n*G = INF),
but it is never computed (e.g. with Schoof's algorithm).
A curve with a wrong order would make any subgroup check meaningless.

Standard curves are loaded from the data/curves.json file:

* SEC 2 v.2 curves
  http://www.secg.org/sec2-v2.pdf
"""

import json
import logging
import secrets
from dataclasses import dataclass
from os import path
from typing import Dict, Optional, Sequence, Union

from dataclasses_json import DataClassJsonMixin

from eclib.alias import Integer
from eclib.ecc.curve_group import CurveGroup, mult_aff
from eclib.ecc.point import Point, hex_field
from eclib.exceptions import EClibValueError
from eclib.utils import HEX_THRESHOLD, hex_string, int_from_integer, int_repr

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyPair(DataClassJsonMixin):
    """Private/public key pair.

    private_key is in [1, n-1], public_key = private_key * G.
    """

    private_key: int = hex_field()
    public_key: Point

    def __repr__(self) -> str:
        # the private key is not shown
        return f"KeyPair(public_key={self.public_key!r})"


class Curve(CurveGroup):
    "Prime order subgroup of the points of an elliptic curve over Fp."

    def __init__(
        self,
        p: Integer,
        a: Integer,
        b: Integer,
        G: Union[Point, Sequence[Integer]],
        n: Integer,
    ) -> None:

        super().__init__(p, a, b)

        # 2. check that xG and yG are integers in the interval [0, p−1]
        # 4. Check that yG^2 = xG^3 + a*xG + b (mod p)
        if not isinstance(G, Point):
            if len(G) != 2:
                raise EClibValueError("Generator must a be a sequence[int, int]")
            G = Point(int_from_integer(G[0]), int_from_integer(G[1]))
        if G.is_infinity:
            raise EClibValueError("INF point cannot be a generator")
        if not (0 <= G.x < self.p and 0 <= G.y < self.p):
            raise EClibValueError("Generator coordinates not in 0..p-1")
        if not self.contains(G):
            raise EClibValueError("Generator is not on the curve")
        self.G = G

        n = int_from_integer(n)
        # 5. Check that n is prime.
        if n < 2 or n % 2 == 0 or pow(2, n - 1, n) != 1:
            raise EClibValueError(f"n is not prime: {int_repr(n)}")

        # 7. Check that nG = INF
        if not mult_aff(n, self.G, self).is_infinity:
            raise EClibValueError(f"n is not the group order: {int_repr(n)}")
        self.n = n

    def __str__(self) -> str:
        result = super().__str__()
        if self.p > HEX_THRESHOLD:
            result += f"\n x_G = {hex_string(self.G.x)}"
            result += f"\n y_G = {hex_string(self.G.y)}"
        else:
            result += f"\n x_G = {self.G.x}"
            result += f"\n y_G = {self.G.y}"
        if self.n > HEX_THRESHOLD:
            result += f"\n n   = {hex_string(self.n)}"
        else:
            result += f"\n n   = {self.n}"
        return result

    def __repr__(self) -> str:
        result = super().__repr__()[:-1]
        if self.p > HEX_THRESHOLD:
            result += f", ('{hex_string(self.G.x)}', '{hex_string(self.G.y)}')"
        else:
            result += f", ({self.G.x}, {self.G.y})"
        if self.n > HEX_THRESHOLD:
            result += f", '{hex_string(self.n)}'"
        else:
            result += f", {self.n}"
        result += ")"
        return result

    @property
    def order(self) -> int:
        return self.n

    def generate_key_pair(self) -> KeyPair:
        """Return a random private/public key pair.

        The private key is uniformly drawn in [1, n-1]
        from the operating system CSPRNG.
        """
        q = 1 + secrets.randbelow(self.n - 1)
        return KeyPair(q, mult_aff(q, self.G, self))


def _load_curves(filename: str) -> Dict[str, Curve]:
    with open(filename, "r", encoding="ascii") as file_:
        curves_params = json.load(file_)
    curves: Dict[str, Curve] = {}
    for ec_name, params in curves_params.items():
        curves[ec_name] = Curve(**params)
    logger.debug("loaded %d curves from %s", len(curves), filename)
    return curves


datadir = path.join(path.dirname(__file__), "data")
CURVES = _load_curves(path.join(datadir, "curves.json"))

secp256k1 = CURVES["secp256k1"]


def mult(m: Integer, Q: Optional[Point] = None, ec: Curve = secp256k1) -> Point:
    """Return the point multiplication m*Q.

    The input point is checked to be on the curve
    and the m coefficient is reduced mod n.
    Q defaults to the generator G.
    """
    Q = ec.G if Q is None else Q
    ec.require_on_curve(Q)
    m = int_from_integer(m) % ec.n
    return mult_aff(m, Q, ec)
