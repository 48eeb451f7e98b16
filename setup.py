from __future__ import annotations

from setuptools import find_packages, setup  # type: ignore


setup(
    name="streamauth",
    version="0.1.0",
    description="Stream key -> manifest id authorization service for a live streaming pipeline",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "fastapi",
        "uvicorn",
        "httpx",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "streamauth=streamauth.__main__:main",
        ],
    },
)
