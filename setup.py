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
from setuptools import find_namespace_packages, setup

setup(
    name="EdelweissRBF",
    version="24.10",
    description="Harmonic RBF bases with quadratic weak-form reproduction for polygonal and polyhedral cells",
    author="Matthias Neuner",
    author_email="matthias.neuner@uibk.ac.at",
    license="LGPL-2.1-or-later",
    packages=find_namespace_packages(include=["edelweissrbf", "edelweissrbf.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "scipy",
        "prettytable",
    ],
    extras_require={
        "test": ["pytest"],
        "doc": ["sphinx", "numpydoc", "sphinx_rtd_theme"],
    },
)
