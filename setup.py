from setuptools import setup, find_packages

setup(
    name="sysfetch",
    version="0.1.0",
    packages=find_packages(exclude=["*.tests", "*.tests.*"]),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "sysfetch=sysfetch.cli:main",
        ],
    },
    python_requires=">=3.8",
    description="Machine model, OS, kernel and package-count probes for fetch-style tools",
    long_description=open("README.md", encoding="utf-8").read() if __file__ else "",
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
