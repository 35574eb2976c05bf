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
Quadrature rules are supplied by the caller (e.g., from a triangulation of a
polygonal cell). This module only holds and validates them.
"""

import numpy as np

from edelweissrbf.numerics.dimension import Dimension, getDimension
from edelweissrbf.utils.exceptions import DimensionMismatch


class Quadrature:
    """A quadrature rule over the interior of a cell.

    Parameters
    ----------
    points
        The quadrature points, one per row.
    weights
        The quadrature weights, one per point.
    """

    def __init__(self, points: np.ndarray, weights: np.ndarray):
        points = np.array(points, dtype=float, ndmin=2)
        weights = np.array(weights, dtype=float).ravel()

        self._dimension = getDimension(points)

        if weights.shape[0] != points.shape[0]:
            raise DimensionMismatch(
                "Got {:} quadrature weights for {:} quadrature points".format(weights.shape[0], points.shape[0])
            )

        points.flags.writeable = False
        weights.flags.writeable = False

        self._points = points
        self._weights = weights

    @property
    def points(self) -> np.ndarray:
        return self._points

    @property
    def weights(self) -> np.ndarray:
        return self._weights

    @property
    def dimension(self) -> Dimension:
        return self._dimension

    @property
    def nPoints(self) -> int:
        return self._points.shape[0]

    @property
    def volume(self) -> float:
        """The measure of the cell, i.e., the sum of all weights."""
        return float(np.sum(self._weights))
