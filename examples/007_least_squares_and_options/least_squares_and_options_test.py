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

import logging

import numpy as np
import pytest

from edelweissrbf.meshfree.approximations.rbfwithquadratic import RBFWithQuadratic
from edelweissrbf.numerics.leastsquares import solveLeastSquares
from edelweissrbf.numerics.quadrature import Quadrature
from edelweissrbf.utils.exceptions import BasisConstructionFailed, DimensionMismatch


def run_sim(options={}, logger=None, withConstraints=False):
    centers = np.array([[-0.5, -0.5], [1.5, -0.5], [1.5, 1.5], [-0.5, 1.5]])
    ticks = np.linspace(0.0, 1.0, 5)
    collocationPoints = np.array([[x, y] for x in ticks for y in ticks])
    rhs = np.column_stack([np.sin(collocationPoints[:, 0]), np.exp(collocationPoints[:, 1])])

    quadrature = Quadrature([[0.25, 0.25], [0.75, 0.25], [0.75, 0.75], [0.25, 0.75]], [0.25] * 4)
    localBasisIntegral = np.zeros((2, 5))

    return RBFWithQuadratic(
        centers, collocationPoints, localBasisIntegral, quadrature, rhs, withConstraints, options, logger
    )


def test_well_posed_least_squares():
    rng = np.random.default_rng(0)
    A = rng.standard_normal((30, 6))
    expected = rng.standard_normal((6, 2))

    solution = solveLeastSquares(A, A @ expected)

    assert not solution.hasNumericalIssue
    assert np.allclose(solution.weights, expected)


def test_constrained_least_squares():
    rng = np.random.default_rng(1)
    A = rng.standard_normal((30, 6))
    L = rng.standard_normal((6, 3))
    t = rng.standard_normal((6, 1))
    v = rng.standard_normal((3, 1))

    expected = L @ v + t
    solution = solveLeastSquares(A, A @ expected, L, t)

    assert not solution.hasNumericalIssue
    assert np.allclose(solution.weights, expected)

    with pytest.raises(ValueError):
        solveLeastSquares(A, A @ expected, L=L)


def test_numerical_issue_is_a_warning(caplog):
    rng = np.random.default_rng(2)
    A = rng.standard_normal((20, 4))
    # a duplicate column renders the normal equations singular
    A = np.column_stack([A, A[:, 0]])
    rhs = A @ np.ones((5, 1))

    with caplog.at_level(logging.WARNING):
        solution = solveLeastSquares(A, rhs)

    assert solution.hasNumericalIssue
    assert np.allclose(A @ solution.weights, rhs)
    assert any("Numerical issues" in record.getMessage() for record in caplog.records)


def test_injected_logger(caplog):
    logger = logging.getLogger("edelweissrbf.test.injected")

    with caplog.at_level(logging.DEBUG, logger="edelweissrbf.test.injected"):
        run_sim(logger=logger)

    messages = [record.getMessage() for record in caplog.records if record.name == logger.name]

    assert any("Solving system of size 10x10" in message for message in messages)
    assert any("#collocation points: 25" in message for message in messages)


def test_threshold_option():
    theBasis = run_sim()
    strict = run_sim({"numerical issue threshold": 1.0})

    # no Cholesky factor passes a pivot ratio of 1
    assert strict.hasNumericalIssue
    assert np.isclose(strict.meanResidual, theBasis.meanResidual, rtol=1e-4, atol=1e-6)


def test_options():
    assert run_sim({"compute mean residual": False}).meanResidual is None

    with pytest.raises(ValueError):
        run_sim({"an invalid option": 42})

    with pytest.raises(NotImplementedError):
        run_sim({"kernel": "biharmonic"})

    with pytest.raises(ValueError):
        run_sim({"kernel": "gaussian"})

    # defaults are left untouched
    assert RBFWithQuadratic.validOptions["numerical issue threshold"] == 1e-12


def test_local_index():
    theBasis = run_sim()
    samples = np.array([[0.5, 0.5]])

    assert theBasis.basis(1, samples).shape == (1,)

    with pytest.raises(IndexError):
        theBasis.basis(2, samples)

    with pytest.raises(IndexError):
        theBasis.grad(-1, samples)


def test_construction_failures():
    centers = np.array([[-0.5, -0.5], [1.5, -0.5], [1.5, 1.5]])
    collocationPoints = np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])
    rhs = np.eye(4)

    with pytest.raises(DimensionMismatch):
        RBFWithQuadratic(centers, collocationPoints, None, None, rhs[:3], False)

    with pytest.raises(DimensionMismatch):
        RBFWithQuadratic(np.pad(centers, ((0, 0), (0, 1))), collocationPoints, None, None, rhs, False)

    with pytest.raises(BasisConstructionFailed):
        RBFWithQuadratic(np.zeros((3, 4)), collocationPoints, None, None, rhs, False)

    # constraints require a quadrature and the local basis integral
    with pytest.raises(ValueError):
        RBFWithQuadratic(centers, collocationPoints, None, None, rhs, True)

    quadrature = Quadrature(collocationPoints, np.full(4, 0.25))
    with pytest.raises(DimensionMismatch):
        RBFWithQuadratic(centers, collocationPoints, np.zeros((4, 9)), quadrature, rhs, True)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    print(run_sim(withConstraints=True).makePrettyTableSummary())
