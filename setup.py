from setuptools import setup, find_packages

setup(
    name="tlsearch",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "sudachipy",
        "sudachidict-core",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
