"""
Setup script for matsel

Pure Python package; numpy is the only hard requirement. scipy is optional
(sparse interop in DenseMatrix.from_scipy / to_scipy).
"""

from pathlib import Path
from setuptools import setup, find_packages


# Read version from src/matsel/__init__.py
def get_version():
    version_file = Path("src/matsel/__init__.py")
    if version_file.exists():
        for line in version_file.read_text().splitlines():
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.1.0"


# Read long description from README
def get_long_description():
    readme = Path("README.md")
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


setup(
    name="matsel",
    version=get_version(),
    description="MATLAB-style sub-matrix selection with index ranges",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "numpy>=1.20",
    ],
    extras_require={
        "scipy": ["scipy>=1.7"],
        "test": [
            "pytest>=7.0",
            "scipy>=1.7",
        ],
    },
    zip_safe=True,
)
