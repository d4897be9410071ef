"""
Snapshot Scoring Core - Setup Configuration
Multicall batching, space registry lookups and strategy scoring for governance spaces
"""

from setuptools import setup, find_packages
import os

# Read the README file
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Read requirements
def read_requirements(file):
    """Read requirements from file"""
    if os.path.exists(file):
        with open(file, 'r') as f:
            return [line.strip() for line in f if line.strip() and not line.startswith('#')]
    return []

setup(
    name="snapshot-scoring-core",
    version="0.1.0",
    description="Chain-state reads and voting-power scoring for governance spaces",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
        "Framework :: AsyncIO",
    ],
    packages=find_packages(exclude=["tests*", "docs*", "scripts*"]),
    python_requires=">=3.11",
    install_requires=read_requirements("requirements.txt"),
    extras_require={
        "dev": read_requirements("test-requirements.txt"),
    },
    include_package_data=True,
    zip_safe=False,
    keywords=[
        "snapshot", "governance", "voting", "multicall",
        "ethereum", "heco", "web3"
    ],
)
