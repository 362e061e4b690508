# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="wordtracker",
    version="1.0.0",
    description="Index the words of text files and report the files and lines where they occur",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["wordtracker", "wordtracker.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'wordtracker=wordtracker.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
