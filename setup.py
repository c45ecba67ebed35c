"""
Setup script so `templaterender` can be installed / recognized as a package.
"""

from setuptools import setup, find_packages

setup(
    name="templaterender",
    version="1.0.0",
    description="A minimal server-side template renderer with scoped variables",
    packages=find_packages(include=["templaterender", "templaterender.*"]),
    python_requires=">=3.8",
    extras_require={"test": ["pytest"]},
)
