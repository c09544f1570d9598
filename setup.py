"""Setup configuration for clean-energy-readiness module."""

from setuptools import setup, find_packages
from pathlib import Path

# Read README file
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="clean-energy-readiness",
    version="1.0.0",
    description="Clean Energy Readiness Score (CERS) ranking and exports for regional funding prioritization",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["clean_energy_readiness", "clean_energy_readiness.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=[
        "pandas>=2.0.0",
        "numpy>=1.24.0",
        "pyyaml>=6.0",
        "python-json-logger>=3.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "isort>=5.12.0",
            "flake8>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "clean-energy-readiness=clean_energy_readiness.cli:main",
        ],
    },
    include_package_data=True,
    package_data={
        "clean_energy_readiness": ["config/*.yaml"],
    },
)
