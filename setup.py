"""
Setup script for the Walsh logo package.
"""

from setuptools import setup, find_packages

setup(
    name="walsh-logo",
    version="0.1.0",
    description="Sequency-ordered Walsh matrix loading and logo rendering",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.24.0",
        "scipy>=1.10.0",
        "pillow>=9.5.0",
        "tqdm>=4.65.0",
        "pyyaml>=6.0",
        "matplotlib>=3.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "black>=23.0.0",
            "isort>=5.12.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "walsh-logo=pipeline.make_logo:main",
            "walsh-matrix=pipeline.generate_matrix:main",
        ],
    },
)
