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
The design matrix maps the weights of the kernels and of the quadratic
polynomial to values at a set of samples:

.. code-block:: console

    A[i, :] = [ h(|p_i - c_0|) ... h(|p_i - c_K|)  1  x_i  y_i  x_i*y_i  x_i²  y_i² ]

Columns are ordered as
[kernels] [constant] [linear] [mixed: xy (, yz, zx)] [quadratic: x², y² (, z²)].
"""

import numpy as np

from edelweissrbf.meshfree.kernelfunctions.base.baseradialkernel import (
    BaseRadialKernel,
)
from edelweissrbf.meshfree.kernelfunctions.harmonickernel import HarmonicKernel
from edelweissrbf.numerics.dimension import Dimension, checkDimension, getDimension
from edelweissrbf.utils.exceptions import DimensionMismatch


def nWeights(nKernels: int, dimension: Dimension) -> int:
    """The number of unknowns per basis: #kernels + 1 + d + d(d+1)/2."""
    return nKernels + Dimension(dimension).nPolynomialTerms


def computeDistances(centers: np.ndarray, samples: np.ndarray) -> np.ndarray:
    """Compute all distances between samples (rows) and centers (columns)."""
    return np.linalg.norm(samples[:, np.newaxis, :] - centers[np.newaxis, :, :], axis=2)


def _prepare(centers, samples, kernel):
    centers = np.asarray(centers, dtype=float)
    samples = np.array(samples, dtype=float, ndmin=2)

    dimension = getDimension(centers)
    checkDimension(samples, dimension, "samples")

    if kernel is None:
        kernel = HarmonicKernel(dimension)
    elif kernel.dimension != dimension:
        raise DimensionMismatch(
            "Kernel for dimension {:} used with {:}D centers".format(int(kernel.dimension), int(dimension))
        )

    return centers, samples, dimension, kernel


def computeKernelsMatrix(
    centers: np.ndarray, samples: np.ndarray, kernel: BaseRadialKernel = None
) -> np.ndarray:
    """Assemble the design matrix A at the given samples.

    Parameters
    ----------
    centers
        The kernel centers, one per row.
    samples
        The sample points, one per row.
    kernel
        The radial kernel; defaults to the harmonic kernel of the centers' dimension.

    Returns
    -------
    np.ndarray
        The matrix A of shape (#samples, #kernels + 1 + d + d(d+1)/2).
    """

    centers, samples, dimension, kernel = _prepare(centers, samples, kernel)
    nKernels = centers.shape[0]
    dim = int(dimension)

    A = np.empty((samples.shape[0], nWeights(nKernels, dimension)))

    A[:, :nKernels] = kernel.value(computeDistances(centers, samples))

    # constant term
    A[:, nKernels] = 1.0
    # linear terms
    A[:, nKernels + 1 : nKernels + 1 + dim] = samples
    # mixed terms
    mixedStart = nKernels + 1 + dim
    for i, (a, b) in enumerate(dimension.mixedPairs):
        A[:, mixedStart + i] = samples[:, a] * samples[:, b]
    # quadratic terms
    A[:, -dim:] = samples**2

    return A


def computeKernelsGradientMatrix(
    centers: np.ndarray, axis: int, samples: np.ndarray, kernel: BaseRadialKernel = None
) -> np.ndarray:
    """Assemble the derivative of the design matrix with respect to one spatial axis.

    For the kernel columns,

    .. math::

        \\frac{\\partial h(r)}{\\partial x_a} = \\frac{x_a - c_a}{r} h'(r),

    which is 0 for r below the kernel cutoff.

    Parameters
    ----------
    centers
        The kernel centers, one per row.
    axis
        The spatial axis of the derivative.
    samples
        The sample points, one per row.
    kernel
        The radial kernel; defaults to the harmonic kernel of the centers' dimension.

    Returns
    -------
    np.ndarray
        The matrix ∂A/∂x_axis of shape (#samples, #kernels + 1 + d + d(d+1)/2).
    """

    centers, samples, dimension, kernel = _prepare(centers, samples, kernel)
    nKernels = centers.shape[0]
    dim = int(dimension)

    if not 0 <= axis < dim:
        raise DimensionMismatch("Axis {:} is invalid in {:}D".format(axis, dim))

    APrime = np.zeros((samples.shape[0], nWeights(nKernels, dimension)))

    offsets = samples[:, np.newaxis, axis] - centers[np.newaxis, :, axis]
    APrime[:, :nKernels] = offsets * kernel.derivativeOverR(computeDistances(centers, samples))

    # linear terms
    APrime[:, nKernels + 1 + axis] = 1.0
    # mixed terms
    mixedStart = nKernels + 1 + dim
    for i, (a, b) in enumerate(dimension.mixedPairs):
        if axis == a:
            APrime[:, mixedStart + i] = samples[:, b]
        elif axis == b:
            APrime[:, mixedStart + i] = samples[:, a]
    # quadratic terms
    APrime[:, nKernels + 1 + dim + dimension.nMixedTerms + axis] = 2.0 * samples[:, axis]

    return APrime
