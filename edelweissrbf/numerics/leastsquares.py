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
Least-squares solvers for the weights of the cell bases.

The unconstrained problem min |A w - b| is solved through the normal equations

.. math::

    A^T A \\, w = A^T b .

With constraints w = L v + t, the reduced normal equations read

.. math::

    L^T A^T A L \\, v = L^T A^T (b - A t) .

Both are factored by Cholesky. If the factorization fails or reveals a
near-singular system, a warning is issued and the solve falls back to an SVD
based least-squares solve of the (reduced) design system.
A poorly conditioned cell is tolerable for the assembly, hence this is not an error.
"""

import logging
import typing

import numpy as np
import scipy.linalg

log = logging.getLogger(__name__)


class LeastSquaresSolution(typing.NamedTuple):
    """The solved weights, and whether numerical issues were encountered."""

    weights: np.ndarray
    hasNumericalIssue: bool


def _choleskySolve(N: np.ndarray, b: np.ndarray, numericalIssueThreshold: float):
    """Solve N x = b by Cholesky.

    Returns None if the factorization fails or if the squared ratio of
    the smallest to the largest pivot is below the threshold.
    """

    try:
        factor, lower = scipy.linalg.cho_factor(N)
    except np.linalg.LinAlgError:
        return None

    pivots = np.abs(np.diag(factor))
    if pivots.max() == 0.0 or (pivots.min() / pivots.max()) ** 2 < numericalIssueThreshold:
        return None

    return scipy.linalg.cho_solve((factor, lower), b)


def solveLeastSquares(
    A: np.ndarray,
    rhs: np.ndarray,
    L: np.ndarray = None,
    t: np.ndarray = None,
    numericalIssueThreshold: float = 1e-12,
    logger: logging.Logger = None,
) -> LeastSquaresSolution:
    """Solve the (optionally constrained) least-squares problem for the weights.

    Parameters
    ----------
    A
        The design matrix at the collocation points.
    rhs
        The target values, one column per basis.
    L
        The constraint reduction matrix; None for an unconstrained solve.
    t
        The constraint translation, one column per basis; required together with L.
    numericalIssueThreshold
        Threshold for the squared pivot ratio of the Cholesky factor below which
        the normal equations are considered near-singular.
    logger
        The logger receiving the diagnostics; defaults to the module logger.

    Returns
    -------
    LeastSquaresSolution
        The weights (one column per basis) and the numerical issue flag.
    """

    if logger is None:
        logger = log

    if (L is None) != (t is None):
        raise ValueError("Constraint matrix L and translation t must be given together")

    if L is None:
        B = A
        b = rhs
    else:
        B = A @ L
        b = rhs - A @ t

    logger.debug("-- Solving system of size {:}x{:}".format(B.shape[1], B.shape[1]))

    x = _choleskySolve(B.T @ B, B.T @ b, numericalIssueThreshold)
    hasNumericalIssue = x is None

    if hasNumericalIssue:
        logger.warning("-- WARNING: Numerical issues when solving the harmonic least square.")
        x = scipy.linalg.lstsq(B, b)[0]

    logger.debug("-- Solved!")

    if L is None:
        return LeastSquaresSolution(x, hasNumericalIssue)

    return LeastSquaresSolution(L @ x + t, hasNumericalIssue)
