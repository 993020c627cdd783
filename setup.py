from setuptools import find_packages, setup


setup(
    name="cholwishart",
    version='1.0',
    description="Cholesky factors of Wishart and inverse Wishart random matrices implemented in Numpy and Scipy.",
    packages=find_packages(exclude=["examples", "examples.*"]),
    python_requires=">=3.7",
    install_requires=[
        "numpy",
        "scipy",
    ],
    extras_require={
        "examples": ["tqdm"],
    },
    keywords="statistics wishart bartlett cholesky bayesian inference sampling",
)
