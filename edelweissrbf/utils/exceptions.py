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
Exceptions raised during the construction of meshfree cell bases.

Geometry and dimension errors abort the construction of a cell basis.
Numerical quality issues of the least-squares solve are not raised at all;
they are reported as warnings, since the assembly must tolerate locally poor
conditioning.
"""


class BasisConstructionFailed(Exception):
    """Base class for all errors which prevent a cell basis from being constructed."""


class DimensionMismatch(BasisConstructionFailed, ValueError):
    """The spatial dimension of some input is not 2 or 3, or is not consistent
    with the dimension of the kernel centers."""


class SingularConstraintMatrix(BasisConstructionFailed):
    """The moment matrix of the weak-form constraints is not invertible,
    e.g. for a cell with zero volume."""
