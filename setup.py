from setuptools import setup, find_packages

setup(
    name="inspectcode-issues",
    version="1.0.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "PyYAML>=6.0",
        "pydantic>=2.0",
        "lxml>=4.9",
        "colorlog>=6.0",
        "typer>=0.9",
        "rich>=13.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0,<9.1",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "inspectcode-issues=inspectcode_issues.main:main",
        ],
    },
)
