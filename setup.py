from setuptools import setup, find_packages

setup(
    name="wirebox",
    version="1.0.0",
    packages=find_packages(include=["wirebox", "wirebox.*", "cli", "cli.*"]),
    install_requires=[
        "click>=8.1.0",
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "wirebox=cli.main:main",
        ],
    },
    author="wirebox",
    author_email="your.email@example.com",
    description="Reflection-driven dependency injection container with modules, scopes and lifecycle tooling",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
)
