from setuptools import setup, find_packages

setup(
    name="rationalsolve",
    version="1.0",
    description="Exact rational solver for systems of linear equations",
    long_description=("Reduces augmented matrices of exact rational numbers to reduced row echelon form with "
                      "Gauss-Jordan elimination and reports a unique solution, a family of solutions with free "
                      "variables, or that the system has no solution"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(include=["rationalsolve", "rationalsolve.*"]),
    install_requires=["numpy", "psutil"],
    extras_require={
        "test": ["pytest", "pytest-timeout", "sympy"],
    },
    entry_points={
        "console_scripts": ["rationalsolve=rationalsolve.cli:start_from_command_line"],
    },
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["linear equations", "gauss-jordan", "reduced row echelon form", "rational arithmetic"],
    zip_safe=False,
)
