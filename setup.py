from setuptools import setup, find_namespace_packages


setup(
    name="strmatch",
    version="0.1.0",
    description="Exact and approximate string matching: suffix trees, BWT and FM-index",
    packages=find_namespace_packages(include=["strmatch", "strmatch.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "pydantic>=2",
    ],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=False,
)
