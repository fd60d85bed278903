from setuptools import find_packages, setup


setup(
    name="typedispatch",
    version="0.1.0",
    description="Scalar-type dispatch: bind one generic kernel body to the runtime element type",
    author="Relja",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.24",
    ],
    extras_require={
        "dev": [
            "pytest>=7",
        ],
    },
    zip_safe=False,
)
