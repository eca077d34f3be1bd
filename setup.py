# setup.py
from setuptools import setup, find_packages

setup(
    name="polaris",
    version="0.3.0",
    description="A small embeddable Lisp interpreter",
    packages=find_packages(include=["polaris", "polaris.*"]),
    python_requires=">=3.11",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["polaris=polaris.__main__:main"],
    },
    zip_safe=False,
)
