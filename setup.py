"""
budgetizer
Design-space exploration for multi-tier storage hierarchies under a budget
"""

from setuptools import find_packages, setup

setup(
    name="storage-budgetizer",
    version="0.1.0",
    description="Budget-constrained device-count search for storage hierarchies",
    author="SAGE Project",
    license="Apache License 2.0",
    packages=find_packages(include=["budgetizer", "budgetizer.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "ruff>=0.1.0",
        ],
    },
)
