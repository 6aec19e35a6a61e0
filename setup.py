import setuptools


setuptools.setup(
    name="simdrng",
    version="0.1.0",
    description="Scalar and 4-lane batch non-cryptographic random number generators",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=["numpy", "torch"],
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx", "sphinx_rtd_theme"],
    },
)
