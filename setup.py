# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="cssinliner",
    version="0.1.0",
    description="Resolve @import directives into a single self-contained stylesheet",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["cssinliner*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'cssinliner=cssinliner.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
