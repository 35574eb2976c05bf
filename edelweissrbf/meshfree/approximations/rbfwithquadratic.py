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
Harmonic RBF bases augmented by quadratic polynomials.

For each finite element basis φ which is nonzero on the polygonal cell E,
we solve the least-squares problem A w = b, where A holds the kernels and
monomials evaluated at the collocation points (see
:mod:`~edelweissrbf.meshfree.approximations.designmatrix`), and b holds the
values φ is expected to take there. Optionally, the weights are constrained
such that the quadratic monomials are reproduced in the weak form of the
Laplacian (see :mod:`~edelweissrbf.meshfree.constraints.harmonicconstraints`).

.. code-block:: python

    theBasis = RBFWithQuadratic(centers, collocationPoints, localBasisIntegral, quadrature, rhs, True)

    values = theBasis.basis(0, samples)
    gradients = theBasis.grad(0, samples)
"""

import logging

import numpy as np
from prettytable import PrettyTable

from edelweissrbf.config.kernellibrary import getKernel
from edelweissrbf.meshfree.approximations.base.basecellbasis import BaseCellBasis
from edelweissrbf.meshfree.approximations.designmatrix import (
    computeKernelsGradientMatrix,
    computeKernelsMatrix,
)
from edelweissrbf.meshfree.constraints.harmonicconstraints import computeConstraints
from edelweissrbf.numerics.dimension import Dimension, checkDimension, getDimension
from edelweissrbf.numerics.leastsquares import solveLeastSquares
from edelweissrbf.numerics.quadrature import Quadrature
from edelweissrbf.utils.exceptions import DimensionMismatch

log = logging.getLogger(__name__)


class RBFWithQuadratic(BaseCellBasis):
    """The bases of a single cell, spanned by harmonic kernels and quadratic polynomials.

    The weights are computed once during construction; afterwards, the instance is read-only.

    Parameters
    ----------
    centers
        The kernel centers, one per row (2 or 3 columns).
    collocationPoints
        The points at which the bases are fitted to the right-hand side, one per row.
    localBasisIntegral
        The weak-form contributions from outside the cell, shape (#bases, 5) in 2D or (#bases, 9) in 3D.
        Only required with constraints.
    quadrature
        The quadrature rule over the interior of the cell. Only required with constraints.
    rhs
        The expected values of the bases at the collocation points, shape (#collocation points, #bases).
    withConstraints
        Enforce the weak-form reproduction of quadratic monomials.
    options
        The dict of options overriding :attr:`validOptions`.
    logger
        The logger receiving the diagnostics; defaults to the module logger.
    """

    identification = "RBFWithQuadratic"

    validOptions = {
        "kernel": "harmonic",
        "numerical issue threshold": 1e-12,
        "compute mean residual": True,
    }

    def __init__(
        self,
        centers: np.ndarray,
        collocationPoints: np.ndarray,
        localBasisIntegral: np.ndarray,
        quadrature: Quadrature,
        rhs: np.ndarray,
        withConstraints: bool = True,
        options: dict = {},
        logger: logging.Logger = None,
    ):
        self.options = self.validOptions.copy()
        if not set(options).issubset(self.validOptions):
            raise ValueError("Invalid options in basis options!")
        self.options.update(options)

        self._logger = logger if logger is not None else log

        centers = np.array(centers, dtype=float, ndmin=2)
        self._dimension = getDimension(centers)
        centers.flags.writeable = False
        self._centers = centers

        self._kernel = getKernel(self.options["kernel"], self._dimension)

        self._withConstraints = withConstraints
        self._meanResidual = None

        self._computeWeights(collocationPoints, localBasisIntegral, quadrature, rhs, withConstraints)

    @property
    def dimension(self) -> Dimension:
        return self._dimension

    @property
    def centers(self) -> np.ndarray:
        return self._centers

    @property
    def nKernels(self) -> int:
        return self._centers.shape[0]

    @property
    def nBases(self) -> int:
        return self._weights.shape[1]

    @property
    def weights(self) -> np.ndarray:
        """The weights of shape (#kernels + 1 + d + d(d+1)/2, #bases)."""
        return self._weights

    @property
    def hasNumericalIssue(self) -> bool:
        """True if the least-squares solve was (near) singular."""
        return self._hasNumericalIssue

    @property
    def meanResidual(self) -> float:
        """The mean over all bases of the max. absolute residual at the collocation points."""
        return self._meanResidual

    def _computeWeights(
        self,
        collocationPoints: np.ndarray,
        localBasisIntegral: np.ndarray,
        quadrature: Quadrature,
        rhs: np.ndarray,
        withConstraints: bool,
    ):
        collocationPoints = np.array(collocationPoints, dtype=float, ndmin=2)
        checkDimension(collocationPoints, self._dimension, "collocation points")

        rhs = np.asarray(rhs, dtype=float)
        if rhs.ndim == 1:
            rhs = rhs[:, np.newaxis]
        if rhs.ndim != 2 or rhs.shape[0] != collocationPoints.shape[0]:
            raise DimensionMismatch(
                "Right-hand side of shape {:} does not match {:} collocation points".format(
                    rhs.shape, collocationPoints.shape[0]
                )
            )

        nBases = rhs.shape[1]
        self._nCollocationPoints = collocationPoints.shape[0]
        self._nQuadraturePoints = len(quadrature.weights) if quadrature is not None else 0

        self._logger.debug("#kernel centers: {:}".format(self.nKernels))
        self._logger.debug("#collocation points: {:}".format(collocationPoints.shape[0]))
        self._logger.debug("#quadrature points: {:}".format(self._nQuadraturePoints))
        self._logger.debug("#non-vanishing bases: {:}".format(nBases))

        A = computeKernelsMatrix(self._centers, collocationPoints, self._kernel)

        if withConstraints:
            if quadrature is None or localBasisIntegral is None:
                raise ValueError("Constrained bases require a quadrature and a local basis integral")

            L, t = computeConstraints(self._centers, quadrature, localBasisIntegral, nBases, self._kernel)
            solution = solveLeastSquares(
                A, rhs, L, t, self.options["numerical issue threshold"], logger=self._logger
            )
        else:
            solution = solveLeastSquares(
                A, rhs, numericalIssueThreshold=self.options["numerical issue threshold"], logger=self._logger
            )

        weights = solution.weights
        weights.flags.writeable = False
        self._weights = weights
        self._hasNumericalIssue = solution.hasNumericalIssue

        if self.options["compute mean residual"]:
            self._meanResidual = float(np.abs(A @ weights - rhs).max(axis=0).mean())
            self._logger.debug("-- Mean residual: {:}".format(self._meanResidual))

    def basesValues(self, samples: np.ndarray) -> np.ndarray:
        return computeKernelsMatrix(self._centers, samples, self._kernel) @ self._weights

    def basesGrads(self, axis: int, samples: np.ndarray) -> np.ndarray:
        return computeKernelsGradientMatrix(self._centers, axis, samples, self._kernel) @ self._weights

    def makePrettyTableSummary(self) -> PrettyTable:
        """Create a pretty table with a summary of the basis construction."""
        prettytable = PrettyTable(("basis property", ""))

        prettytable.add_row(("dimension", int(self._dimension)))
        prettytable.add_row(("kernel", self.options["kernel"]))
        prettytable.add_row(("kernel centers", self.nKernels))
        prettytable.add_row(("collocation points", self._nCollocationPoints))
        prettytable.add_row(("quadrature points", self._nQuadraturePoints))
        prettytable.add_row(("non-vanishing bases", self.nBases))
        prettytable.add_row(("unknowns per basis", self._weights.shape[0]))
        prettytable.add_row(("weak-form constraints", self._dimension.nConstraints if self._withConstraints else 0))
        prettytable.add_row(("numerical issues", self._hasNumericalIssue))
        prettytable.add_row(("mean residual", self._meanResidual))

        prettytable.align = "l"

        return prettytable
