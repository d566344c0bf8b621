from setuptools import setup, find_packages

setup(
    name="flopchain",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    install_requires=["numpy>=1.19.0"],
    extras_require={
        "test": ["pytest>=6.0", "pytest-cov"],
    },
    python_requires=">=3.7",
)
