from setuptools import setup, find_packages

setup(
    name="pynumassert",
    version="1.0.0",
    description="Tolerance-aware assertion helpers for testing numerical code",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.22.0",
        "scipy>=1.8.0",
        "pandas>=1.3.0"
    ],
    extras_require={
        "test": ["pytest>=7.0"]
    },
    python_requires=">=3.8",
)
