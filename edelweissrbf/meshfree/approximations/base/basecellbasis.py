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
""" """

from abc import ABC, abstractmethod

import numpy as np

from edelweissrbf.numerics.dimension import Dimension


class BaseCellBasis(ABC):
    """Base class for the bases living on a single polygonal (polyhedral) cell.

    A cell basis holds all bases which do not vanish on the cell. Once
    constructed, it can be evaluated at any point of the cell.
    Evaluation never modifies the instance, hence it may be shared between concurrent readers.

    """

    @property
    @abstractmethod
    def dimension(self) -> Dimension:
        """The spatial dimension of the cell."""

    @property
    @abstractmethod
    def nBases(self) -> int:
        """The number of non-vanishing bases on the cell."""

    @abstractmethod
    def basesValues(self, samples: np.ndarray) -> np.ndarray:
        """Evaluate all bases at the given samples.

        Parameters
        ----------
        samples
            The evaluation points, one per row.

        Returns
        -------
        np.ndarray
            The basis values of shape (#samples, #bases).
        """

    @abstractmethod
    def basesGrads(self, axis: int, samples: np.ndarray) -> np.ndarray:
        """Evaluate the derivative of all bases along one axis at the given samples.

        Parameters
        ----------
        axis
            The spatial axis of the derivative.
        samples
            The evaluation points, one per row.

        Returns
        -------
        np.ndarray
            The derivatives of shape (#samples, #bases).
        """

    @property
    def isVolume(self) -> bool:
        return self.dimension.isVolume

    def _checkLocalIndex(self, localIndex: int):
        if not 0 <= localIndex < self.nBases:
            raise IndexError("Local basis index {:} out of range for {:} bases".format(localIndex, self.nBases))

    def basis(self, localIndex: int, samples: np.ndarray) -> np.ndarray:
        """Evaluate a single basis at the given samples.

        Parameters
        ----------
        localIndex
            The local index of the basis on the cell.
        samples
            The evaluation points, one per row.

        Returns
        -------
        np.ndarray
            The values of shape (#samples,).
        """

        self._checkLocalIndex(localIndex)
        return self.basesValues(samples)[:, localIndex]

    def grad(self, localIndex: int, samples: np.ndarray) -> np.ndarray:
        """Evaluate the gradient of a single basis at the given samples.

        Parameters
        ----------
        localIndex
            The local index of the basis on the cell.
        samples
            The evaluation points, one per row.

        Returns
        -------
        np.ndarray
            The gradients of shape (#samples, d), one column per spatial axis.
        """

        self._checkLocalIndex(localIndex)
        return np.column_stack([self.basesGrads(axis, samples)[:, localIndex] for axis in range(self.dimension)])
