"""Setup script for overlay-menu."""

from pathlib import Path

from setuptools import find_packages, setup

# Read the version from __version__.py
version_dict = {}
with open("overlay_menu/__version__.py") as f:
    exec(f.read(), version_dict)

VERSION = version_dict["__version__"]

# Read the long description from README
README = Path("README.md").read_text(encoding="utf-8")

setup(
    name="overlay-menu",
    version=VERSION,
    description="Keyboard-navigable hierarchical text menu overlay for graphics applications",
    long_description=README,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "Pillow>=10.1.0",
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "pytest-mock>=3.10.0",
            "ruff>=0.1.0",
            "black>=23.0.0",
            "isort>=5.12.0",
            "mypy>=1.0.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Multimedia :: Graphics",
        "Topic :: Software Development :: User Interfaces",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="menu overlay keyboard text-menu graphics pillow",
)
