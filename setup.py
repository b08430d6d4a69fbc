"""
Setup script for the salad-bowl package.

The game core lives in the internal modules (_*/), while the public API
(models.py, settings.py, errors.py, types.py, session.py) stays small
and readable.
"""

from setuptools import setup, find_packages

setup(
    name="salad-bowl",
    version="1.0.0",
    description="Salad Bowl - pass-and-play party word game core with a terminal front end",
    author="Salad Bowl Developers",
    license="MIT",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "salad-bowl=salad_bowl.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Games/Entertainment",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
