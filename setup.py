# SPDX-FileCopyrightText: 2020 Lukas Schrangl <lukas.schrangl@tuwien.ac.at>
#
# SPDX-License-Identifier: BSD-3-Clause

from setuptools import setup, find_packages


setup(
    name="pcse-chair",
    version="1.0.0",
    python_requires=">=3.10",
    install_requires=["pandas"],
    extras_require={"test": ["pytest"]},
    packages=find_packages(include=["pcse*"]),
)
