from setuptools import find_packages, setup

setup(
    name="contentsync",
    version="0.1.0",
    description="Content Sync - mirror an authoring directory into a static site while you edit",
    packages=find_packages(include=["contentsync", "contentsync.*"]),
    python_requires=">=3.10",
    install_requires=[
        "watchdog",  # File system monitoring
        "rich",  # Terminal formatting and log handler
        "pydantic>=2",  # Configuration models
        "typer<0.26",  # CLI (0.26+ no longer exposes its context via click.get_current_context)
        "click",  # CLI exceptions and context (imported directly)
        "pyyaml",  # YAML output for CLI commands
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "contentsync=contentsync.cli:main",
        ],
    },
)
