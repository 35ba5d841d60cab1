"""
Setup script for quizdeck.

QuizDeck is a terminal quiz trainer. It loads a YAML bank of study
questions grouped by chapter, lets the learner choose chapters and a
number of questions, asks them one by one and reports the score.

Question kinds: multiple choice, matching, fill in the blank, spelling.
"""

from setuptools import find_namespace_packages, setup

setup(
    name="quizdeck",
    version="1.0.0",
    description="Terminal chapter quiz trainer",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_namespace_packages(include=["src", "src.*"]),
    py_modules=["config"],
    package_data={"src.content": ["data/*.yaml"]},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Question bank
        "PyYAML>=6.0",
        # Config & Validation
        "pydantic>=2.5.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "quizdeck=src.cli.quizdeck_cli:run",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="quiz cli education study",
)
