#!/usr/bin/env python3

# Copyright (C) 2017-2021 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions raised
by eclib and those raised by other codebases.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the eclib versions are derived.

"Expected" negative outcomes (a missing square root,
an invalid signature) are never raised:
they are returned as None or False.
"""


class EClibValueError(ValueError):
    pass


class EClibTypeError(TypeError):
    pass


class EClibRuntimeError(RuntimeError):
    pass
