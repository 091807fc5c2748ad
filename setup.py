from setuptools import setup, find_packages

setup(
    name="sand_patterns",
    version="1.0.0",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=[
        # Core Dependencies
        "pyyaml>=6.0.1",
        "loguru>=0.7.0",
        "pydantic>=2.0.0",

        # API Dependencies
        "fastapi>=0.95.0",
        "uvicorn>=0.22.0",
    ],
    extras_require={
        "dev": [
            # Testing
            "pytest>=7.3.1",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.0.0",
            "httpx>=0.24.0",

            # Development Tools
            "black>=23.3.0",
            "flake8>=6.0.0",
            "mypy>=1.3.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "sand-patterns=sand_patterns.__main__:run",
        ],
    },
    python_requires=">=3.9",
)
