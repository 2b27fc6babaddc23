"""
Setup script for the SendOwl transport.
"""

from pathlib import Path
from setuptools import find_packages, setup

# Read version from VERSION file
version_file = Path(__file__).parent / "VERSION"
version = version_file.read_text().strip()

setup(
    name="sendowl-transport",
    version=version,
    description="Lower-case JSON and multipart transport for the SendOwl REST API",
    author="Garudex Labs",
    packages=find_packages(include=["sendowl", "sendowl.*"]),
    python_requires=">=3.10",
    install_requires=[
        "httpx>=0.24",
        "pydantic>=2.5",
        "structlog>=23.1",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
)
