from setuptools import setup, find_packages

# Core dependencies (always required)
install_requires = [
    "python-dotenv>=1.0.0,<2.0.0",
]

# Optional dependencies
extras_require = {
    # psycopg2 is used by the tests to parse generated URIs with libpq
    "test": ["pytest>=7.0.0", "psycopg2-binary>=2.9.0,<3.0.0"],
}

setup(
    name="connstrgen",
    version="0.1.0",
    description="Connection string generator for PostgreSQL and SQL Server",
    packages=find_packages(),
    install_requires=install_requires,
    extras_require=extras_require,
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
