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
Weak-form constraints ensure that each monomial Q of degree <= 2 lies in the
span of the finite element bases. For Laplace's equation, any basis φ_j
which is nonzero on the polygonal cell E must satisfy

.. math::

    \\int_E \\nabla Q \\cdot \\nabla \\varphi_j + \\int_E \\Delta Q \\, \\varphi_j
    = - \\int_{\\Omega \\setminus E} \\nabla Q \\cdot \\nabla \\varphi_j
      - \\int_{\\Omega \\setminus E} \\Delta Q \\, \\varphi_j .

The right-hand side is known in advance (the local basis integral).
Inserting φ_j = Σ_k w_k ψ_k + a_00 + Σ a_Q Q, the left-hand side splits into a
small moment matrix M acting on the non-constant polynomial coefficients, and
a part depending on the kernel weights and on a_00 only:

.. code-block:: console

    M a = c - K w

Hence, the polynomial coefficients are eliminated by w_full = L v + t, with v
holding the kernel weights and a_00, and

.. code-block:: console

        ┏           ┓        ┏          ┓
        ┃ I         ┃        ┃ 0        ┃
    L = ┃           ┃,   t = ┃          ┃
        ┃ -M^-1 K   ┃        ┃ M^-1 c   ┃
        ┗           ┛        ┗          ┛

In 2D, M is 5x5 (x, y, xy, x², y²); in 3D, M is 9x9 (x, y, z, xy, yz, zx, x², y², z²).
"""

import typing

import numpy as np
import scipy.linalg

from edelweissrbf.meshfree.approximations.designmatrix import nWeights
from edelweissrbf.meshfree.kernelfunctions.base.baseradialkernel import (
    BaseRadialKernel,
)
from edelweissrbf.meshfree.kernelfunctions.harmonickernel import HarmonicKernel
from edelweissrbf.numerics.dimension import Dimension, checkDimension, getDimension
from edelweissrbf.numerics.quadrature import Quadrature
from edelweissrbf.utils.exceptions import DimensionMismatch, SingularConstraintMatrix


class KernelIntegrals(typing.NamedTuple):
    """Integrals of the kernels ψ_k over the cell.

    - constant: ∫ψ_k, shape (#kernels,)
    - linear: ∫∂_a ψ_k, shape (#kernels, d)
    - mixed: ∫(x_b ∂_a ψ_k + x_a ∂_b ψ_k) per mixed pair (a, b), shape (#kernels, #mixed)
    - squared: ∫x_a ∂_a ψ_k, shape (#kernels, d)
    """

    constant: np.ndarray
    linear: np.ndarray
    mixed: np.ndarray
    squared: np.ndarray


class MomentIntegrals(typing.NamedTuple):
    """Polynomial moments of the cell: |E|, ∫x_a, ∫x_a x_b per mixed pair, ∫x_a²."""

    volume: float
    linear: np.ndarray
    mixed: np.ndarray
    squared: np.ndarray

    @property
    def dimension(self) -> Dimension:
        return Dimension(self.linear.shape[0])


def integrateKernels(centers: np.ndarray, quadrature: Quadrature, kernel: BaseRadialKernel) -> KernelIntegrals:
    """Integrate the kernels and their gradients over the cell.

    Every integral is accumulated as Σ_q value(p_q) * w_q.

    Parameters
    ----------
    centers
        The kernel centers, one per row.
    quadrature
        The quadrature rule of the cell.
    kernel
        The radial kernel.

    Returns
    -------
    KernelIntegrals
        The integrals for all kernels.
    """

    points = np.asarray(quadrature.points, dtype=float)
    weights = np.asarray(quadrature.weights, dtype=float)
    dimension = getDimension(centers)

    # (#quadrature points, #kernels, d)
    offsets = points[:, np.newaxis, :] - centers[np.newaxis, :, :]
    r = np.linalg.norm(offsets, axis=2)

    constant = weights @ kernel.value(r)
    weightedGradients = offsets * (kernel.derivativeOverR(r) * weights[:, np.newaxis])[:, :, np.newaxis]

    linear = weightedGradients.sum(axis=0)
    squared = np.einsum("qa,qka->ka", points, weightedGradients)
    mixed = np.column_stack(
        [
            points[:, b] @ weightedGradients[:, :, a] + points[:, a] @ weightedGradients[:, :, b]
            for a, b in dimension.mixedPairs
        ]
    )

    return KernelIntegrals(constant, linear, mixed, squared)


def integrateMoments(quadrature: Quadrature) -> MomentIntegrals:
    """Compute the polynomial moments of the cell from the quadrature rule."""

    points = np.asarray(quadrature.points, dtype=float)
    weights = np.asarray(quadrature.weights, dtype=float)
    dimension = getDimension(points)

    volume = float(np.sum(weights))
    linear = weights @ points
    squared = weights @ points**2
    mixed = np.array([weights @ (points[:, a] * points[:, b]) for a, b in dimension.mixedPairs])

    return MomentIntegrals(volume, linear, mixed, squared)


def assembleConstraintMatrix2D(moments: MomentIntegrals) -> np.ndarray:
    """Assemble the 5x5 moment matrix M for a planar cell.

    Rows are the constraints for x, y, xy, x², y²; columns the coefficients of the same monomials.
    """

    if moments.dimension != Dimension.Planar:
        raise DimensionMismatch("Planar constraint matrix requested for {:}D moments".format(moments.dimension))

    V = moments.volume
    Ix, Iy = moments.linear
    (Ixy,) = moments.mixed
    Ixx, Iyy = moments.squared

    # fmt: off
    return np.array(
        [
            [V,      0,      Iy,        2 * Ix,    0      ],
            [0,      V,      Ix,        0,         2 * Iy ],
            [Iy,     Ix,     Ixx + Iyy, 2 * Ixy,   2 * Ixy],
            [4 * Ix, 2 * Iy, 4 * Ixy,   6 * Ixx,   2 * Iyy],
            [2 * Ix, 4 * Iy, 4 * Ixy,   2 * Ixx,   6 * Iyy],
        ]
    )
    # fmt: on


def assembleConstraintMatrix3D(moments: MomentIntegrals) -> np.ndarray:
    """Assemble the 9x9 moment matrix M for a polyhedral cell.

    Rows are the constraints for x, y, z, xy, yz, zx, x², y², z²; columns the coefficients of the same monomials.
    """

    if moments.dimension != Dimension.Volume:
        raise DimensionMismatch("Volumetric constraint matrix requested for {:}D moments".format(moments.dimension))

    V = moments.volume
    Ix, Iy, Iz = moments.linear
    Ixy, Iyz, Izx = moments.mixed
    Ixx, Iyy, Izz = moments.squared

    # fmt: off
    M = np.array(
        [
            [V,      0,      0,      Iy,        0,         Iz,        2 * Ix,   0,        0       ],
            [0,      V,      0,      Ix,        Iz,        0,         0,        2 * Iy,   0       ],
            [0,      0,      V,      0,         Iy,        Ix,        0,        0,        2 * Iz  ],
            [Iy,     Ix,     0,      Ixx + Iyy, Izx,       Iyz,       2 * Ixy,  2 * Ixy,  0       ],
            [0,      Iz,     Iy,     Izx,       Iyy + Izz, Ixy,       0,        2 * Iyz,  2 * Iyz ],
            [Iz,     0,      Ix,     Iyz,       Ixy,       Izz + Ixx, 2 * Izx,  0,        2 * Izx ],
            [2 * Ix, 0,      0,      2 * Ixy,   0,         2 * Izx,   4 * Ixx,  0,        0       ],
            [0,      2 * Iy, 0,      2 * Ixy,   2 * Iyz,   0,         0,        4 * Iyy,  0       ],
            [0,      0,      2 * Iz, 0,         2 * Iyz,   2 * Izx,   0,        0,        4 * Izz ],
        ]
    )
    # fmt: on

    # the Laplacian of the squared monomials is 2: ∫2φ adds 2 * moments to their rows
    M[6:, :] += 2.0 * np.concatenate((moments.linear, moments.mixed, moments.squared))

    return M


_constraintMatrixAssemblers = {
    Dimension.Planar: assembleConstraintMatrix2D,
    Dimension.Volume: assembleConstraintMatrix3D,
}


def assembleConstraintMatrix(moments: MomentIntegrals) -> np.ndarray:
    """Assemble the moment matrix M for the dimension of the given moments."""
    return _constraintMatrixAssemblers[moments.dimension](moments)


def factorConstraintMatrix(M: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Check the moment matrix for invertibility and factor it.

    Parameters
    ----------
    M
        The moment matrix.

    Returns
    -------
    tuple[np.ndarray, np.ndarray]
        The LU factorization as returned by :func:`scipy.linalg.lu_factor`.

    Raises
    ------
    SingularConstraintMatrix
        If M is not invertible.
    """

    if not np.all(np.isfinite(M)):
        raise SingularConstraintMatrix("Constraint matrix contains non-finite entries")

    rank = np.linalg.matrix_rank(M)
    if rank < M.shape[0]:
        raise SingularConstraintMatrix(
            "Constraint matrix of size {:}x{:} has rank {:}; is the cell degenerate?".format(*M.shape, rank)
        )

    return scipy.linalg.lu_factor(M)


def computeConstraints(
    centers: np.ndarray,
    quadrature: Quadrature,
    localBasisIntegral: np.ndarray,
    nBases: int,
    kernel: BaseRadialKernel = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Compute the reduction w = L v + t which enforces the weak-form constraints.

    Parameters
    ----------
    centers
        The kernel centers, one per row.
    quadrature
        The quadrature rule over the interior of the cell.
    localBasisIntegral
        The weak-form contributions from outside the cell, shape (#bases, 5) in 2D or (#bases, 9) in 3D.
    nBases
        The number of non-vanishing bases on the cell.
    kernel
        The radial kernel; defaults to the harmonic kernel of the centers' dimension.

    Returns
    -------
    tuple[np.ndarray, np.ndarray]
        The tuple containing:
            - L of shape (#kernels + 1 + d + d(d+1)/2, #kernels + 1),
            - t of shape (#kernels + 1 + d + d(d+1)/2, #bases).
    """

    centers = np.asarray(centers, dtype=float)
    dimension = getDimension(centers)
    checkDimension(quadrature.points, dimension, "quadrature points")

    localBasisIntegral = np.asarray(localBasisIntegral, dtype=float)
    if localBasisIntegral.shape != (nBases, dimension.nConstraints):
        raise DimensionMismatch(
            "Local basis integral of shape {:} does not match {:} bases with {:} constraints".format(
                localBasisIntegral.shape, nBases, dimension.nConstraints
            )
        )

    if kernel is None:
        kernel = HarmonicKernel(dimension)

    kernelIntegrals = integrateKernels(centers, quadrature, kernel)
    moments = integrateMoments(quadrature)

    M = assembleConstraintMatrix(moments)
    luAndPiv = factorConstraintMatrix(M)

    nKernels = centers.shape[0]
    dim = int(dimension)
    linearStart = nKernels + 1
    mixedStart = linearStart + dim
    squaredStart = mixedStart + dimension.nMixedTerms

    L = np.zeros((nWeights(nKernels, dimension), nKernels + 1))
    L[:linearStart, :] = np.eye(nKernels + 1)
    L[linearStart:mixedStart, :nKernels] = -kernelIntegrals.linear.T
    L[mixedStart:squaredStart, :nKernels] = -kernelIntegrals.mixed.T
    L[squaredStart:, :nKernels] = -2.0 * (kernelIntegrals.squared + kernelIntegrals.constant[:, np.newaxis]).T
    L[squaredStart:, nKernels] = -2.0 * moments.volume
    L[linearStart:, :] = scipy.linalg.lu_solve(luAndPiv, L[linearStart:, :])

    t = np.zeros((L.shape[0], nBases))
    t[linearStart:, :] = scipy.linalg.lu_solve(luAndPiv, localBasisIntegral.T)

    return L, t
