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
EdelweissRBF currently supports harmonic kernels, i.e., the fundamental
solutions of the Laplace equation.
A biharmonic kernel (r² (ln r - 1), planar only) has been considered, but the
quadratic weak-form constraints are derived for the harmonic formulation only.
"""

from edelweissrbf.meshfree.kernelfunctions.base.baseradialkernel import (
    BaseRadialKernel,
)
from edelweissrbf.numerics.dimension import Dimension


def getKernel(name: str, dimension: Dimension) -> BaseRadialKernel:
    """Get an instance of the requested radial kernel.

    Parameters
    ----------
    name
        The name of the kernel.
    dimension
        The spatial dimension the kernel is evaluated in.

    Returns
    -------
    BaseRadialKernel
        The kernel instance.
    """

    if name.lower() == "harmonic":
        from edelweissrbf.meshfree.kernelfunctions.harmonickernel import (
            HarmonicKernel,
        )

        return HarmonicKernel(dimension)

    if name.lower() == "biharmonic":
        raise NotImplementedError("Biharmonic kernels are not supported by the quadratic constraint formulation")

    raise ValueError("Unknown kernel '{:}'".format(name))
