from setuptools import setup, find_packages

with open("README.md", "rt", encoding="utf8") as f:
    readme = f.read()

setup(
    name="runtime-fees",
    description="Fee schedule and receipt cost model of a sharded blockchain runtime",
    version="0.0.1",
    long_description=readme,
    long_description_content_type="text/markdown",
    python_requires=">=3.8, <4",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    tests_require=[],
    extras_require={
        "testing": ["pytest"],
        "linting": ["flake8", "mypy"],
    },
    install_requires=[
        "remerkleable>=0.1.24",
        "Click",
    ],
    include_package_data=True,
    entry_points={
        'console_scripts': [
            'runtime-fees = runtime_fees._cli:cli',
        ],
    },
    keywords=["sharding", "gas", "fees", "receipts", "runtime"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Operating System :: OS Independent",
    ],
)
