from setuptools import setup, find_packages

setup(
    name="spork",
    version="0.1.0",
    description="A build system for C projects on top of zig cc",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    keywords=["c", "zig", "build"],
    python_requires=">=3.11",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "toml",
        "returns",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "spork = spork.main:main",
        ]
    },
)
