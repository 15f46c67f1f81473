#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class and functions.

Note that CurveGroup does not have to be a cyclic group.
For the cyclic subgroup class of prime order Curve,
see the eclib.ecc.curve module.
"""

from typing import Optional

from eclib.alias import Integer
from eclib.ecc.number_theory import mod_inv, mod_sqrt
from eclib.ecc.point import INF, Point
from eclib.exceptions import EClibTypeError, EClibValueError
from eclib.utils import HEX_THRESHOLD, hex_string, int_from_integer, int_repr


class CurveGroup:
    """Finite group of the points of an elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being a prime),
    together with a point at infinity INF.
    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.

    The group is defined by the point addition group law.
    """

    def __init__(self, p: Integer, a: Integer, b: Integer) -> None:
        # Parameters are checked according to SEC 1 v.2 3.1.1.2.1

        p = int_from_integer(p)
        a = int_from_integer(a)
        b = int_from_integer(b)

        # 1) check that p is a prime
        # Fermat test will do as _probabilistic_ primality test...
        if p < 2 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            raise EClibValueError(f"p is not prime: {int_repr(p)}")
        self.p = p

        # 2. check that a and b are integers in the interval [0, p−1]
        if a < 0:
            raise EClibValueError(f"negative a: {a}")
        if p <= a:
            raise EClibValueError(f"p <= a: {int_repr(p)} <= {int_repr(a)}")
        if b < 0:
            raise EClibValueError(f"negative b: {b}")
        if p <= b:
            raise EClibValueError(f"p <= b: {int_repr(p)} <= {int_repr(b)}")

        # 3. Check that 4*a^3 + 27*b^2 ≠ 0 (mod p)
        d = 4 * a * a * a + 27 * b * b
        if d % p == 0:
            raise EClibValueError("zero discriminant")
        self._a = a
        self._b = b

    @property
    def a(self) -> int:
        return self._a

    @property
    def b(self) -> int:
        return self._b

    def __str__(self) -> str:
        result = "Curve"
        if self.p > HEX_THRESHOLD:
            result += f"\n p   = {hex_string(self.p)}"
        else:
            result += f"\n p   = {self.p}"

        if self._a > HEX_THRESHOLD or self._b > HEX_THRESHOLD:
            result += f"\n a   = {hex_string(self._a)}"
            result += f"\n b   = {hex_string(self._b)}"
        else:
            result += f"\n a   = {self._a}"
            result += f"\n b   = {self._b}"

        return result

    def __repr__(self) -> str:
        result = "Curve("
        result += f"'{hex_string(self.p)}'" if self.p > HEX_THRESHOLD else f"{self.p}"
        if self._a > HEX_THRESHOLD or self._b > HEX_THRESHOLD:
            result += f", '{hex_string(self._a)}', '{hex_string(self._b)}'"
        else:
            result += f", {self._a}, {self._b}"

        result += ")"
        return result

    # methods using p: they could become functions

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        if not isinstance(Q, Point):
            raise EClibTypeError("not a point")
        if Q.is_infinity:
            return INF
        return Point(Q.x, (self.p - Q.y) % self.p)

    # methods using _a, _b, p

    def _y2(self, x: int) -> int:
        # skipping a crucial check here:
        # if sqrt(y*y) does not exist, then x is not valid.
        # This is a good reason to keep this method private
        return ((x * x + self._a) * x + self._b) % self.p

    def contains(self, Q: Point) -> bool:
        """Return True if the point is on the curve.

        The infinity point is always on the curve.
        """
        if not isinstance(Q, Point):
            raise EClibTypeError("not a point")
        if Q.is_infinity:
            return True
        return self._y2(Q.x) == Q.y * Q.y % self.p

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.contains(Q):
            raise EClibValueError("point not on curve")

    def recover_point(self, x: int, odd: Optional[bool] = None) -> Optional[Point]:
        """Return the curve point with the given x-coordinate.

        None is returned if there is no such point,
        i.e. if x^3 + a*x + b is not a quadratic residue.
        Both (x, y) and (x, p-y) are on the curve:
        odd selects the root by parity, if not None.
        """
        y = mod_sqrt(self._y2(x), self.p)
        if y is None:
            return None
        if odd is not None and y % 2 != odd:
            y = (self.p - y) % self.p
        return Point(x % self.p, y)

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """

        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return self._add_aff(Q1, Q2)

    def double(self, Q: Point) -> Point:
        """Return the double of a point.

        The input point must be on the curve.
        """

        self.require_on_curve(Q)
        return self._add_aff(Q, Q)

    def _add_aff(self, Q: Point, R: Point) -> Point:
        # points are assumed to be on curve

        if Q.is_infinity:
            return R
        if R.is_infinity:
            return Q

        # opposite points, including the points with y = 0
        # which are their own opposite
        same_x = (Q.x - R.x) % self.p == 0
        if same_x and (Q.y + R.y) % self.p == 0:
            return INF

        if not same_x:
            lam = (R.y - Q.y) * mod_inv(R.x - Q.x, self.p)
        else:  # point doubling
            lam = (3 * Q.x * Q.x + self._a) * mod_inv(2 * Q.y, self.p)
        x = lam * lam - Q.x - R.x
        y = lam * (Q.x - x) - Q.y
        return Point(x % self.p, y % self.p)

    def scalar_mul(self, Q: Point, m: int) -> Point:
        """Return m*Q, the scalar multiplication of a point.

        The input point must be on the curve, m must be non-negative.
        """

        self.require_on_curve(Q)
        return mult_aff(m, Q, self)


def mult_aff(m: int, Q: Point, ec: CurveGroup) -> Point:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient,
    affine coordinates.

    It is not constant-time: both running time and the sequence
    of group operations depend on the bits of m,
    so it leaks the scalar to side-channel analysis.

    The input point is assumed to be on curve and
    the m coefficient is assumed to have been reduced mod n
    if appropriate (e.g. cyclic groups of order n).
    """

    if m < 0:
        raise EClibValueError(f"negative m: {hex(m)}")

    R = INF  # initialize as infinity point
    while m > 0:  # use binary representation of m
        if m & 1:  # if least significant bit is 1
            R = ec._add_aff(R, Q)  # then add current Q
        Q = ec._add_aff(Q, Q)  # double Q for next step
        m >>= 1  # remove the bit just accounted for
    return R
