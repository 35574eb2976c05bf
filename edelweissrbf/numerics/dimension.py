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
The spatial dimension is the tag which selects between the planar and the
volumetric variants of kernels and weak-form constraints.
"""

from enum import IntEnum

import numpy as np

from edelweissrbf.utils.exceptions import DimensionMismatch


class Dimension(IntEnum):
    """Supported spatial dimensions."""

    Planar = 2
    Volume = 3

    @property
    def isVolume(self) -> bool:
        return self is Dimension.Volume

    @property
    def nMixedTerms(self) -> int:
        """The number of mixed monomials xy (, yz, zx)."""
        return len(self.mixedPairs)

    @property
    def mixedPairs(self) -> tuple[tuple[int, int], ...]:
        """The axis pairs (a, b) of the mixed monomials x_a * x_b, in column order."""
        if self is Dimension.Planar:
            return ((0, 1),)
        return ((0, 1), (1, 2), (2, 0))

    @property
    def nConstraints(self) -> int:
        """The number of non-constant monomials of degree <= 2.

        This is also the number of weak-form constraints per basis (5 in 2D, 9 in 3D).
        """
        return int(self) + self.nMixedTerms + int(self)

    @property
    def nPolynomialTerms(self) -> int:
        """The number of monomials of degree <= 2, including the constant."""
        return 1 + self.nConstraints


def getDimension(coordinates: np.ndarray) -> Dimension:
    """Determine the dimension tag from a set of coordinates.

    Parameters
    ----------
    coordinates
        The coordinates, one point per row.

    Returns
    -------
    Dimension
        The dimension tag.

    Raises
    ------
    DimensionMismatch
        If the coordinates are not a 2D array with 2 or 3 columns.
    """

    coordinates = np.asarray(coordinates)
    if coordinates.ndim != 2:
        raise DimensionMismatch("Expected a 2D array of coordinates, got {:} dimensions".format(coordinates.ndim))

    try:
        return Dimension(coordinates.shape[1])
    except ValueError:
        raise DimensionMismatch("Dimension {:} not supported".format(coordinates.shape[1])) from None


def checkDimension(coordinates: np.ndarray, dimension: Dimension, name: str = "coordinates"):
    """Ensure that a set of coordinates lives in the given dimension.

    Raises
    ------
    DimensionMismatch
        If the coordinates do not have exactly `dimension` columns.
    """

    coordinates = np.asarray(coordinates)
    if coordinates.ndim != 2 or coordinates.shape[1] != dimension:
        raise DimensionMismatch(
            "The {:} of shape {:} do not match the dimension {:}".format(name, coordinates.shape, int(dimension))
        )
