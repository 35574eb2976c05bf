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

from edelweissrbf.config.kernellibrary import getKernel
from edelweissrbf.meshfree.kernelfunctions.harmonickernel import (
    KERNEL_CUTOFF,
    HarmonicKernel,
    kernel,
    kernelPrime,
    kernelPrimeOverR,
)
from edelweissrbf.numerics.dimension import Dimension


def run_sim():
    r = np.array([0.0, 0.5 * KERNEL_CUTOFF, 0.25, 1.0, 3.0])

    return {
        "planar": (kernel(False, r), kernelPrime(False, r), kernelPrimeOverR(False, r)),
        "volume": (kernel(True, r), kernelPrime(True, r), kernelPrimeOverR(True, r)),
    }


def test_planar_kernel():
    r = np.array([0.25, 1.0, 3.0])

    assert np.allclose(kernel(False, r), np.log(r))
    assert np.allclose(kernelPrime(False, r), 1.0 / r)
    assert np.allclose(kernelPrimeOverR(False, r), 1.0 / r**2)


def test_volume_kernel():
    r = np.array([0.25, 1.0, 3.0])

    assert np.allclose(kernel(True, r), 1.0 / r)
    assert np.allclose(kernelPrime(True, r), -1.0 / r**2)
    assert np.allclose(kernelPrimeOverR(True, r), -1.0 / r**3)


def test_cutoff():
    results = run_sim()

    for values, derivatives, derivativesOverR in results.values():
        # the first two distances are inside the cutoff
        assert np.all(values[:2] == 0.0)
        assert np.all(derivatives[:2] == 0.0)
        assert np.all(derivativesOverR[:2] == 0.0)

        assert np.all(np.isfinite(values))
        assert np.all(np.isfinite(derivatives))
        assert np.all(np.isfinite(derivativesOverR))


def test_scalar_distance():
    assert kernel(False, 0.0) == 0.0
    assert np.isclose(kernel(False, np.e), 1.0)
    assert np.isclose(kernelPrime(True, 2.0), -0.25)
    assert np.ndim(kernel(True, 2.0)) == 0


def test_harmonic_kernel_class():
    r = np.linspace(0.1, 2.0, 7)

    planar = HarmonicKernel(Dimension.Planar)
    volume = HarmonicKernel(3)

    assert not planar.isVolume
    assert volume.isVolume
    assert volume.dimension == Dimension.Volume

    assert np.allclose(planar.value(r), kernel(False, r))
    assert np.allclose(volume.derivative(r), kernelPrime(True, r))
    assert np.allclose(volume.derivativeOverR(r) * r, volume.derivative(r))

    assert repr(planar) == "HarmonicKernel(2D)"


def test_kernel_library():
    theKernel = getKernel("harmonic", Dimension.Volume)
    assert isinstance(theKernel, HarmonicKernel)
    assert theKernel.isVolume

    assert isinstance(getKernel("Harmonic", Dimension.Planar), HarmonicKernel)

    with pytest.raises(NotImplementedError):
        getKernel("biharmonic", Dimension.Planar)

    with pytest.raises(ValueError):
        getKernel("gaussian", Dimension.Planar)


if __name__ == "__main__":
    for name, (values, derivatives, derivativesOverR) in run_sim().items():
        print(name)
        print(values)
        print(derivatives)
        print(derivativesOverR)
