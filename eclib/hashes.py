#!/usr/bin/env python3

# Copyright (C) The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SHA-256 implementation according to FIPS PUB 180-4.

https://nvlpubs.nist.gov/nistpubs/FIPS/NIST.FIPS.180-4.pdf

The SHA256 class mimics the hashlib interface (update, digest, copy)
and adds the integer digest used as ECDSA message representative.

Example::

    h = SHA256()
    h.append(b"ab")
    h.append("c")
    h.hex_digest()
    # 'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from eclib.alias import String
from eclib.exceptions import EClibRuntimeError
from eclib.utils import bytes_from_string

BLOCK_SIZE = 64
DIGEST_SIZE = 32
_MASK = 0xFFFFFFFF

# first 32 bits of the fractional parts of the cube roots
# of the first 64 primes 2..311
K: Tuple[int, ...] = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)  # fmt: skip

# first 32 bits of the fractional parts of the square roots
# of the first 8 primes 2..19
IV: Tuple[int, ...] = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)  # fmt: skip


def _rotr(x: int, n: int) -> int:
    return (x >> n) | (x << (32 - n)) & _MASK


def pad(message: bytes, length: Optional[int] = None) -> bytes:
    """Return the padded message tail.

    A single 0x80 byte is appended, then zero bytes until the length
    is 56 (mod 64), then the big-endian 64-bit message bit-length.

    length is the byte-length of the whole message,
    when message is just its not yet compressed tail.
    """

    if length is None:
        length = len(message)
    padded = message + b"\x80"
    padded += b"\x00" * ((56 - len(padded)) % BLOCK_SIZE)
    padded += (length * 8 & 0xFFFFFFFFFFFFFFFF).to_bytes(8, byteorder="big")
    return padded


def blocks(padded: bytes) -> List[bytes]:
    "Split the padded message in 64-byte blocks."

    if len(padded) % BLOCK_SIZE != 0:
        err_msg = "padded message length is not a multiple of 64 bytes: "
        err_msg += f"{len(padded)}"
        raise EClibRuntimeError(err_msg)
    return [padded[i : i + BLOCK_SIZE] for i in range(0, len(padded), BLOCK_SIZE)]


def expand_block(block: bytes) -> List[int]:
    "Return the 64-word message schedule of a 64-byte block."

    w = [int.from_bytes(block[i : i + 4], byteorder="big") for i in range(0, 64, 4)]
    for i in range(16, 64):
        s0 = _rotr(w[i - 15], 7) ^ _rotr(w[i - 15], 18) ^ (w[i - 15] >> 3)
        s1 = _rotr(w[i - 2], 17) ^ _rotr(w[i - 2], 19) ^ (w[i - 2] >> 10)
        w.append((w[i - 16] + s0 + w[i - 7] + s1) & _MASK)
    return w


def compress(state: Sequence[int], block: bytes) -> Tuple[int, ...]:
    "Return the hash state updated with a 64-byte block."

    w = expand_block(block)
    a, b, c, d, e, f, g, h = state
    for i in range(64):
        S1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
        ch = (e & f) ^ (~e & g)
        temp1 = (h + S1 + ch + K[i] + w[i]) & _MASK
        S0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
        maj = (a & b) ^ (a & c) ^ (b & c)
        temp2 = (S0 + maj) & _MASK

        h = g
        g = f
        f = e
        e = (d + temp1) & _MASK
        d = c
        c = b
        b = a
        a = (temp1 + temp2) & _MASK

    return tuple((x + y) & _MASK for x, y in zip(state, (a, b, c, d, e, f, g, h)))


class SHA256:
    """SHA-256 running hash.

    Message data can be appended at will;
    the digest can be read (in several formats) any number of times,
    also between appends, as it never alters the running state.

    Instances are not meant to be shared among concurrent computations.
    """

    name = "sha256"
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data: String = b"") -> None:
        self._state: Tuple[int, ...] = IV
        self._buffer = b""
        self._length = 0
        self.append(data)

    def reset(self) -> None:
        "Restore the initial state, discarding any appended data."
        self._state = IV
        self._buffer = b""
        self._length = 0

    def append(self, data: String) -> None:
        "Extend the message: bytes or (UTF-8 encoded) text string."

        data = bytes_from_string(data)
        self._length += len(data)
        buffer = self._buffer + data
        # only full blocks are compressed, the tail waits for more data
        n_full = len(buffer) - len(buffer) % BLOCK_SIZE
        for block in blocks(buffer[:n_full]):
            self._state = compress(self._state, block)
        self._buffer = buffer[n_full:]

    update = append

    def copy(self) -> SHA256:
        "Return an independent clone of the running hash."
        other = SHA256()
        other._state = self._state
        other._buffer = self._buffer
        other._length = self._length
        return other

    def _final_state(self) -> Tuple[int, ...]:
        state = self._state
        for block in blocks(pad(self._buffer, self._length)):
            state = compress(state, block)
        return state

    def digest(self) -> bytes:
        "Return the 32-byte digest."
        state = self._final_state()
        return b"".join(word.to_bytes(4, byteorder="big") for word in state)

    def hex_digest(self) -> str:
        "Return the digest as 64 lowercase hex-digits."
        return "".join(f"{word:08x}" for word in self._final_state())

    hexdigest = hex_digest

    def int_digest(self) -> int:
        "Return the digest as unsigned integer, most significant word first."
        result = 0
        for word in self._final_state():
            result = (result << 32) | word
        return result


def sha256(data: String) -> bytes:
    "Return the SHA256(*) of the input message."
    return SHA256(data).digest()


def int_from_msg(data: String) -> int:
    "Return the SHA256(*) of the input message as unsigned integer."
    return SHA256(data).int_digest()
