from setuptools import setup, find_packages

setup(
    name="ordered-jobs",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "typer>=0.9.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "ordjobs = ordered_jobs.cli:app"
        ]
    },
    author="Sebx",
    description="Order jobs with single dependencies and reject circular chains.",
    include_package_data=True,
)
