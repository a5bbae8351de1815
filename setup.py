from setuptools import setup, find_packages

TEST_REQUIRES = [
    "pytest>=7.0.0",
    "pytest-cov",
    "respx>=0.20.0",
]

setup(
    name="zabbix_rpc",
    version="0.1.0",
    description="Zabbix JSON-RPC API client",
    author="zabbix_rpc contributors",
    packages=find_packages(include=["zabbix_rpc", "zabbix_rpc.*"]),
    install_requires=[
        "httpx>=0.24.0",
        "opentelemetry-api>=1.14.0",
        "opentelemetry-sdk>=1.14.0",
        "opentelemetry-exporter-otlp>=1.14.0",
    ],
    extras_require={
        "test": TEST_REQUIRES,
        "dev": TEST_REQUIRES + [
            "black",
            "isort",
            "pylint",
        ],
    },
    python_requires=">=3.9",
)
