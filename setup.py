from setuptools import setup, find_packages

setup(
    name="apiservice-sdk",
    version="0.1.0",
    description="Typed async Python client for the JSONPlaceholder REST API",
    author="apiservice Team",
    packages=find_packages(include=["apiservice", "apiservice.*"]),
    install_requires=[
        "httpx>=0.25.1",
        "pydantic>=2.5.0",
        "pydantic-core",
        "structlog>=23.2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    python_requires=">=3.11",
)
