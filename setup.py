# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="treemanifest",
    version="1.0.0",
    description="Enumerate a directory tree into an ordered manifest of relative paths",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["treemanifest", "treemanifest.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'treemanifest=treemanifest.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
