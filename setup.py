from setuptools import find_packages, setup

setup(
    name="cmseditlink",
    version="0.5.0",
    description="Chained links to record edit screens in a CMS admin interface",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration models
        "jinja2",  # Template rendering of links
        "markupsafe",  # HTML escaping of rendered links
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
)
