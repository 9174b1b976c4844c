"""
Setup file for EBS Volume Finder.
Allows installation in development mode: pip install -e .
"""
from setuptools import setup, find_packages

setup(
    name="ebs-volume-finder",
    version="1.0.0",
    description="Discover and validate the tagged EBS volumes of a node",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["discover_volumes"],
    python_requires=">=3.9",
    install_requires=[
        "boto3",
        "botocore",
        "jinja2",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "pytest-mock",
        ],
    },
    entry_points={
        "console_scripts": [
            "discover-ebs-volumes=discover_volumes:run",
        ],
    },
)
