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
Radial kernels are one of the core ingredients of the RBF cell bases.

"""

from abc import ABC, abstractmethod

import numpy as np

from edelweissrbf.numerics.dimension import Dimension


class BaseRadialKernel(ABC):
    """Base class for radial kernels h(r).

    Each kernel is the anchor of one column of the design matrix: it is
    evaluated on the distances r between the samples and one kernel center.

    Each kernel should be derived from this base class in order to follow the general interface.
    """

    @property
    @abstractmethod
    def dimension(self) -> Dimension:
        """Get the spatial dimension the kernel is defined for.

        Returns
        -------
        Dimension
            The spatial dimension.
        """

    @property
    def isVolume(self) -> bool:
        return self.dimension.isVolume

    @abstractmethod
    def value(self, r: np.ndarray) -> np.ndarray:
        """Evaluate the kernel.

        Parameters
        ----------
        r
            The distances to the kernel center.

        Returns
        -------
        np.ndarray
            The kernel values h(r).
        """

    @abstractmethod
    def derivative(self, r: np.ndarray) -> np.ndarray:
        """Evaluate the radial derivative of the kernel.

        Parameters
        ----------
        r
            The distances to the kernel center.

        Returns
        -------
        np.ndarray
            The derivatives h'(r).
        """

    @abstractmethod
    def derivativeOverR(self, r: np.ndarray) -> np.ndarray:
        """Evaluate h'(r) / r, which is the factor of (x - c) in the Cartesian gradient.

        Parameters
        ----------
        r
            The distances to the kernel center.

        Returns
        -------
        np.ndarray
            The values h'(r) / r.
        """
