from setuptools import setup, find_packages

setup(
    name="helpkit",
    version="0.1.0",
    description="Manifest-driven usage help for multi-command CLIs",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "helpkit": ["locales/*.json", "manifest/*.json"],
    },
    install_requires=[
        "typer",
        "rich",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "helpkit=helpkit.cli.app:app",
        ],
    },
    python_requires=">=3.10",
)
