# -*- coding: utf-8 -*-
#  ---------------------------------------------------------------------
#
#  _____    _      _              _           ____   ____   _____
# | ____|__| | ___| |_      _____(_)___ ___  |  _ \ | __ ) |  ___|
# |  _| / _` |/ _ \ \ \ /\ / / _ \ / __/ __| | |_) ||  _ \ | |_
# | |__| (_| |  __/ |\ V  V /  __/ \__ \__ \ |  _ < | |_) ||  _|
# |_____\__,_|\___|_| \_/\_/ \___|_|___/___/ |_| \_\|____/ |_|
#
#
#  Unit of Strength of Materials and Structural Analysis
#  University of Innsbruck,
#  2023 - today
#
#  Matthias Neuner matthias.neuner@uibk.ac.at
#
#  This file is part of EdelweissRBF.
#
#  This library is free software; you can redistribute it and/or
#  modify it under the terms of the GNU Lesser General Public
#  License as published by the Free Software Foundation; either
#  version 2.1 of the License, or (at your option) any later version.
#
#  The full text of the license can be found in the file LICENSE.md at
#  the top level directory of EdelweissRBF.
#  ---------------------------------------------------------------------
"""
Harmonic kernels are the fundamental solutions of the Laplace equation:

.. math::

    h(r) = \\ln r \\quad \\text{(2D)}, \\qquad h(r) = \\frac{1}{r} \\quad \\text{(3D)}.

Both are singular at the kernel center. For r below :data:`KERNEL_CUTOFF` the
kernel and its derivative are defined to be exactly 0, so that samples
coinciding with a center never produce NaN or Inf.
"""

import numpy as np

from edelweissrbf.meshfree.kernelfunctions.base.baseradialkernel import (
    BaseRadialKernel,
)
from edelweissrbf.numerics.dimension import Dimension

KERNEL_CUTOFF = 1e-8


def _evaluateOutsideCutoff(r, function):
    r = np.asarray(r, dtype=float)
    result = np.zeros_like(r)
    regular = r >= KERNEL_CUTOFF
    result[regular] = function(r[regular])
    return result[()]


def kernel(isVolume: bool, r: np.ndarray) -> np.ndarray:
    """Evaluate the harmonic kernel.

    Parameters
    ----------
    isVolume
        True for the 3D kernel 1/r, False for the 2D kernel ln(r).
    r
        The distance(s) to the kernel center.

    Returns
    -------
    np.ndarray
        The kernel value(s); a scalar for a scalar r.
    """

    if isVolume:
        return _evaluateOutsideCutoff(r, np.reciprocal)
    return _evaluateOutsideCutoff(r, np.log)


def kernelPrime(isVolume: bool, r: np.ndarray) -> np.ndarray:
    """Evaluate the radial derivative of the harmonic kernel.

    Parameters
    ----------
    isVolume
        True for the 3D kernel, False for the 2D kernel.
    r
        The distance(s) to the kernel center.

    Returns
    -------
    np.ndarray
        -1/r² in 3D, 1/r in 2D; 0 inside the cutoff.
    """

    if isVolume:
        return _evaluateOutsideCutoff(r, lambda x: -1.0 / (x * x))
    return _evaluateOutsideCutoff(r, np.reciprocal)


def kernelPrimeOverR(isVolume: bool, r: np.ndarray) -> np.ndarray:
    """Evaluate h'(r) / r with the same cutoff as :func:`kernelPrime`."""

    if isVolume:
        return _evaluateOutsideCutoff(r, lambda x: -1.0 / (x * x * x))
    return _evaluateOutsideCutoff(r, lambda x: 1.0 / (x * x))


class HarmonicKernel(BaseRadialKernel):
    """The harmonic kernel for a given dimension.

    Parameters
    ----------
    dimension
        The spatial dimension (2 or 3).
    """

    def __init__(self, dimension: Dimension):
        self._dimension = Dimension(dimension)

    @property
    def dimension(self) -> Dimension:
        return self._dimension

    def value(self, r: np.ndarray) -> np.ndarray:
        return kernel(self.isVolume, r)

    def derivative(self, r: np.ndarray) -> np.ndarray:
        return kernelPrime(self.isVolume, r)

    def derivativeOverR(self, r: np.ndarray) -> np.ndarray:
        return kernelPrimeOverR(self.isVolume, r)

    def __repr__(self):
        return "HarmonicKernel({:}D)".format(int(self._dimension))
