from setuptools import setup, find_packages

setup(
    name="dama",
    version="1.0.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["dama=dama.__main__:main"],
    },
    author="Filipino Dama Team",
    description="Rules engine, state transitions and computer opponent for Filipino checkers (Dama)",
)
