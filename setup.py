from setuptools import setup, find_packages

setup(
    name="mcp_seam",
    version="0.1.0",
    description="MCP Seam - JSON-RPC 2.0 message endpoint for the Model Context Protocol handshake",
    author="MCP Seam Team",
    packages=find_packages(include=["mcp_seam", "mcp_seam.*"]),
    install_requires=[
        "pyzmq>=24.0.0",
        "opentelemetry-api>=1.14.0",
        "opentelemetry-sdk>=1.14.0",
        "opentelemetry-exporter-otlp>=1.14.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov",
            "black",
            "isort",
            "pylint",
        ],
        "test": [
            "pytest>=7.0.0",
            "pytest-cov",
        ],
    },
    entry_points={
        "console_scripts": [
            "mcp-seam=mcp_seam.cli:main",
        ],
    },
    python_requires=">=3.9",
)
