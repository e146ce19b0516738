from setuptools import setup, find_packages

setup(
    name="dataPackage",
    version="0.1.0",
    description="Data packages described by deterministic OAI-ORE resource maps",
    packages=find_packages(include=["dataPackage", "dataPackage.*"]),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0",
        "rdflib>=7.0",
        "PyYAML>=6.0",
        "tabulate>=0.8.9",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["dataPackage=dataPackage.cli:main"],
    },
    license="Apache-2.0",
)
