from __future__ import annotations

from setuptools import find_packages, setup


setup(
    name="prisonersim",
    version="0.1.0",
    description="Monte Carlo estimate of the 100 prisoners problem using union-find cycle tracking",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=["numpy", "joblib"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["prisonersim = prisonersim.__main__:main"]},
)
