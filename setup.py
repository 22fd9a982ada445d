# setup.py
from setuptools import setup, find_packages

setup(
    name="lilsp",
    version="0.0.0.1",
    packages=find_packages(include=["lilsp", "lilsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "lark>=1.1",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "lilsp=lilsp.repl:main",
        ],
    },
    zip_safe=False,
)
