# setup.py
from setuptools import setup, find_packages

setup(
    name="rsp",
    version="0.1.0",
    description="A small Lisp interpreter with closures, modules and namespaced builtins",
    packages=find_packages(include=["rsp", "rsp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["rsp = rsp.cli:main"],
    },
    zip_safe=False,
)
