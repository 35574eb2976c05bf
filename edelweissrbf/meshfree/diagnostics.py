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
Verification aids for cell bases. None of these are required for constructing
a basis; they recompute quantities independently to cross-check the
construction:

- the weak-form identities satisfied by constrained bases,
- the analytical gradients against finite differences,
- the closed-form moment matrix against a generic assembly over monomials.
"""

import numpy as np
from prettytable import PrettyTable

from edelweissrbf.meshfree.approximations.base.basecellbasis import BaseCellBasis
from edelweissrbf.meshfree.constraints.harmonicconstraints import (
    assembleConstraintMatrix,
    integrateMoments,
)
from edelweissrbf.numerics.dimension import Dimension, checkDimension, getDimension
from edelweissrbf.numerics.quadrature import Quadrature

_axisNames = ("x", "y", "z")


def getConstraintMonomials(dimension: Dimension) -> list[np.ndarray]:
    """Get the exponents of the non-constant monomials of degree <= 2, in constraint order."""

    dim = int(dimension)
    unit = np.eye(dim, dtype=int)

    linear = [unit[a] for a in range(dim)]
    mixed = [unit[a] + unit[b] for a, b in dimension.mixedPairs]
    squared = [2 * unit[a] for a in range(dim)]

    return linear + mixed + squared


def getMonomialName(exponents: np.ndarray) -> str:
    name = ""
    for axis, e in enumerate(exponents):
        name += _axisNames[axis] * int(e)
    return name


def _evaluateMonomial(exponents: np.ndarray, points: np.ndarray) -> np.ndarray:
    return np.prod(points**exponents, axis=1)


def _evaluateMonomialGradient(exponents: np.ndarray, points: np.ndarray) -> np.ndarray:
    gradient = np.zeros_like(points)
    for a, e in enumerate(exponents):
        if e > 0:
            reduced = exponents.copy()
            reduced[a] -= 1
            gradient[:, a] = e * _evaluateMonomial(reduced, points)
    return gradient


def _evaluateMonomialLaplacian(exponents: np.ndarray, points: np.ndarray) -> np.ndarray:
    laplacian = np.zeros(points.shape[0])
    for a, e in enumerate(exponents):
        if e > 1:
            reduced = exponents.copy()
            reduced[a] -= 2
            laplacian += e * (e - 1) * _evaluateMonomial(reduced, points)
    return laplacian


def assembleGenericConstraintMatrix(quadrature: Quadrature) -> np.ndarray:
    """Assemble the moment matrix entry by entry as

    .. math::

        M_{ij} = \\int_E \\nabla Q_i \\cdot \\nabla Q_j + \\int_E \\Delta Q_i \\, Q_j ,

    i.e., the Laplacian stiffness of the monomials plus their strong form contribution.

    Parameters
    ----------
    quadrature
        The quadrature rule of the cell.

    Returns
    -------
    np.ndarray
        The matrix of shape (5, 5) in 2D or (9, 9) in 3D.
    """

    points = np.asarray(quadrature.points, dtype=float)
    weights = np.asarray(quadrature.weights, dtype=float)
    monomials = getConstraintMonomials(getDimension(points))

    values = [_evaluateMonomial(e, points) for e in monomials]
    gradients = [_evaluateMonomialGradient(e, points) for e in monomials]
    laplacians = [_evaluateMonomialLaplacian(e, points) for e in monomials]

    n = len(monomials)
    M = np.zeros((n, n))
    for i in range(n):
        for j in range(n):
            stiffness = np.sum(gradients[i] * gradients[j], axis=1)
            M[i, j] = weights @ (stiffness + laplacians[i] * values[j])

    return M


def crossCheckConstraintMatrix(quadrature: Quadrature) -> float:
    """Compare the closed-form moment matrix with the generic assembly.

    Returns
    -------
    float
        The max. absolute difference of all entries.
    """

    closedForm = assembleConstraintMatrix(integrateMoments(quadrature))
    generic = assembleGenericConstraintMatrix(quadrature)

    return float(np.abs(closedForm - generic).max())


def makeConstraintCrossCheckTable(quadrature: Quadrature) -> PrettyTable:
    """Create a pretty table comparing the closed-form and the generic moment matrix entry by entry."""

    closedForm = assembleConstraintMatrix(integrateMoments(quadrature))
    generic = assembleGenericConstraintMatrix(quadrature)
    names = [getMonomialName(e) for e in getConstraintMonomials(getDimension(quadrature.points))]

    prettytable = PrettyTable(("constraint", "coefficient", "closed form", "generic", "diff"))
    for i, constraintName in enumerate(names):
        for j, coefficientName in enumerate(names):
            prettytable.add_row(
                (
                    constraintName,
                    coefficientName,
                    "{:.6e}".format(closedForm[i, j]),
                    "{:.6e}".format(generic[i, j]),
                    "{:.3e}".format(abs(closedForm[i, j] - generic[i, j])),
                )
            )
    prettytable.align = "r"

    return prettytable


def computeWeakFormIntegrals(basis: BaseCellBasis, quadrature: Quadrature) -> np.ndarray:
    """Recompute the weak-form integrals of all bases over the cell.

    Per basis φ, the integrals are (in constraint order)
    ∫∂_a φ, ∫(x_b ∂_a φ + x_a ∂_b φ) for each mixed pair, and ∫(2 x_a ∂_a φ + 2 φ).

    Parameters
    ----------
    basis
        The cell basis.
    quadrature
        The quadrature rule of the cell.

    Returns
    -------
    np.ndarray
        The integrals of shape (#bases, 5) in 2D or (#bases, 9) in 3D.
    """

    points = np.asarray(quadrature.points, dtype=float)
    weights = np.asarray(quadrature.weights, dtype=float)
    dimension = basis.dimension
    checkDimension(points, dimension, "quadrature points")

    values = basis.basesValues(points)
    gradients = [basis.basesGrads(axis, points) for axis in range(dimension)]

    integrals = []
    for a in range(dimension):
        integrals.append(weights @ gradients[a])
    for a, b in dimension.mixedPairs:
        integrals.append(weights @ (points[:, b, np.newaxis] * gradients[a] + points[:, a, np.newaxis] * gradients[b]))
    for a in range(dimension):
        integrals.append(weights @ (2.0 * points[:, a, np.newaxis] * gradients[a] + 2.0 * values))

    return np.column_stack(integrals)


def computeWeakFormResidual(
    basis: BaseCellBasis, quadrature: Quadrature, localBasisIntegral: np.ndarray
) -> np.ndarray:
    """The deviation of the weak-form integrals from the prescribed local basis integral.

    For a constrained basis, this vanishes up to round-off.
    """

    return computeWeakFormIntegrals(basis, quadrature) - np.asarray(localBasisIntegral, dtype=float)


def checkGradientsByFiniteDifferences(basis: BaseCellBasis, samples: np.ndarray, step: float = 1e-6) -> float:
    """Compare the analytical gradients of all bases with central differences.

    Parameters
    ----------
    basis
        The cell basis.
    samples
        The evaluation points, one per row; they should keep a distance of more
        than `step` from the kernel centers.
    step
        The finite difference step.

    Returns
    -------
    float
        The max. deviation, relative to the largest gradient component (or to 1, whichever is larger).
    """

    samples = np.array(samples, dtype=float, ndmin=2)
    checkDimension(samples, basis.dimension, "samples")

    maxDeviation = 0.0
    for axis in range(basis.dimension):
        analytical = basis.basesGrads(axis, samples)

        shift = np.zeros_like(samples)
        shift[:, axis] = step
        numerical = (basis.basesValues(samples + shift) - basis.basesValues(samples - shift)) / (2.0 * step)

        scale = max(1.0, float(np.abs(analytical).max()))
        maxDeviation = max(maxDeviation, float(np.abs(numerical - analytical).max()) / scale)

    return maxDeviation
