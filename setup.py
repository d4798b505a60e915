# setup.py - seqview package
from setuptools import setup, find_packages

setup(
    name="seqview",
    version="0.1.0",
    description="Sequence algorithms over borrowed NumPy buffers",
    packages=find_packages(include=["seqview", "seqview.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.22",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
)
