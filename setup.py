from setuptools import setup, find_packages

setup(
    name="termattrs",
    version="0.1.0",
    description="Cross-platform terminal text attributes over ANSI escapes or the Windows console",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.10",
)
