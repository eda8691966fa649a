from setuptools import setup, find_namespace_packages

setup(
    name="pitchsign",
    version="0.1.0",
    description="Random baseball pitch sign generator with count tracking",
    author="mseibert",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src"),
    py_modules=["config", "main"],
    python_requires=">=3.10",
    install_requires=[
        "PyYAML>=6.0",
        "python-dotenv>=1.0.0",
        "numpy",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "pitchsign=main:main",
        ],
    },
)
