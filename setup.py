"""
iterthing: Lazy Sequence Combinators over Python's Iteration Protocol

One adapter for repeatable sources and single-pass cursors, plus:
1. Lazy combinators (map, filter, chain, zip, pairs, repeat, steps, ...)
2. Terminal operations (collect, each, first, last, reduce, count)
3. A method-chaining LazyChain front end with map fusion
"""

from setuptools import setup, find_packages

setup(
    name="iterthing",
    version="1.0.0",
    description="Lazy sequence combinators over Python's iteration protocol",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="iterthing contributors",
    python_requires=">=3.10",
    packages=find_packages(exclude=("tests", "benchmarks")),
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=7.0",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries",
    ],
)
