import os
from setuptools import setup, find_packages


main_ns = {}
ver_path = os.path.join(os.path.dirname(__file__), 'awairaio', '__version__.py')
with open(ver_path) as ver_file:
    exec(ver_file.read(), main_ns)

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="awairaio",
    version=main_ns["__version__"],
    author="awairaio contributors",
    description="An asynchronous python library for the Awair Local API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    keywords='awair, awair local api, air quality, awair element',
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    python_requires=">=3.9",
    install_requires=[
        "aiohttp>=3.8.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent"
    ],
)
