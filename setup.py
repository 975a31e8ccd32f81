# setup.py
from setuptools import setup, find_packages

setup(
    name="orth",
    version="0.1.0",
    description="A small interpreter for a concatenative, Forth-like language",
    packages=find_packages(include=["orth", "orth.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["orth=orth.__main__:main"],
    },
    zip_safe=False,
)
