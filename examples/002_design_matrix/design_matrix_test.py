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

import numpy as np
import pytest

from edelweissrbf.meshfree.approximations.designmatrix import (
    computeDistances,
    computeKernelsGradientMatrix,
    computeKernelsMatrix,
    nWeights,
)
from edelweissrbf.meshfree.kernelfunctions.harmonickernel import HarmonicKernel
from edelweissrbf.numerics.dimension import Dimension
from edelweissrbf.utils.exceptions import DimensionMismatch


def run_sim(dimension=2):
    if dimension == 2:
        centers = np.array([[-0.5, -0.5], [1.5, -0.5], [1.5, 1.5], [-0.5, 1.5]])
        samples = np.array([[0.2, 0.3], [0.7, 0.1], [0.5, 0.9]])
    else:
        centers = np.array([[-0.5, -0.5, -0.5], [1.5, 1.5, -0.5], [0.5, 1.5, 1.5]])
        samples = np.array([[0.2, 0.3, 0.4], [0.7, 0.1, 0.6]])

    A = computeKernelsMatrix(centers, samples)
    APrime = [computeKernelsGradientMatrix(centers, axis, samples) for axis in range(dimension)]

    return centers, samples, A, APrime


def test_number_of_weights():
    assert nWeights(4, Dimension.Planar) == 10
    assert nWeights(3, Dimension.Volume) == 13
    assert Dimension.Planar.nConstraints == 5
    assert Dimension.Volume.nConstraints == 9


def test_planar_design_matrix():
    centers, samples, A, _ = run_sim(2)

    assert A.shape == (3, 10)

    r = computeDistances(centers, samples)
    assert np.allclose(A[:, :4], np.log(r))

    x, y = samples.T
    assert np.allclose(A[:, 4], 1.0)
    assert np.allclose(A[:, 5], x)
    assert np.allclose(A[:, 6], y)
    assert np.allclose(A[:, 7], x * y)
    assert np.allclose(A[:, 8], x**2)
    assert np.allclose(A[:, 9], y**2)


def test_volume_design_matrix():
    centers, samples, A, _ = run_sim(3)

    assert A.shape == (2, 13)

    r = computeDistances(centers, samples)
    assert np.allclose(A[:, :3], 1.0 / r)

    x, y, z = samples.T
    polynomial = np.column_stack([np.ones(2), x, y, z, x * y, y * z, z * x, x**2, y**2, z**2])
    assert np.allclose(A[:, 3:], polynomial)


@pytest.mark.parametrize("dimension", [2, 3])
def test_gradient_matrix_by_finite_differences(dimension):
    centers, samples, _, APrime = run_sim(dimension)

    step = 1e-6
    for axis in range(dimension):
        shift = np.zeros_like(samples)
        shift[:, axis] = step

        numerical = (computeKernelsMatrix(centers, samples + shift) - computeKernelsMatrix(centers, samples - shift)) / (
            2 * step
        )

        assert np.allclose(APrime[axis], numerical, rtol=1e-5, atol=1e-6)


def test_coincident_center():
    centers = np.array([[0.0, 0.0], [1.0, 0.0], [0.5, 1.0]])
    samples = np.array([[0.0, 0.0], [0.5, 0.5]])

    A = computeKernelsMatrix(centers, samples)
    APrime = [computeKernelsGradientMatrix(centers, axis, samples) for axis in range(2)]

    assert np.all(np.isfinite(A))
    assert A[0, 0] == 0.0
    for APrimeAxis in APrime:
        assert np.all(np.isfinite(APrimeAxis))
        assert APrimeAxis[0, 0] == 0.0


def test_dimension_mismatch():
    centers = np.array([[0.0, 0.0], [1.0, 0.0]])

    with pytest.raises(DimensionMismatch):
        computeKernelsMatrix(centers, np.zeros((2, 3)))

    with pytest.raises(DimensionMismatch):
        computeKernelsGradientMatrix(centers, 2, np.zeros((2, 2)))

    with pytest.raises(DimensionMismatch):
        computeKernelsMatrix(centers, np.zeros((2, 2)), HarmonicKernel(Dimension.Volume))

    with pytest.raises(DimensionMismatch):
        computeKernelsMatrix(np.zeros((2, 4)), np.zeros((2, 4)))

    # dimension errors are value errors, too
    with pytest.raises(ValueError):
        computeKernelsMatrix(np.zeros((2, 1)), np.zeros((2, 1)))


if __name__ == "__main__":
    centers, samples, A, APrime = run_sim()
    print(A)
