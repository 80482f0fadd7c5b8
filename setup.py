from setuptools import setup, find_packages

setup(
    name="exactmat",
    version="0.1",
    description="Exact matrix algebra over the integers and the rationals",
    long_description=("Exact matrix algebra over the integers and the rationals: Hermite and reduced row echelon "
                      "forms, row and column bases, syzygies, one-sided division and reduction modulo row spaces"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.7",
    packages=find_packages(include=["exactmat", "exactmat.*"]),
    install_requires=["numpy", "scipy", "sympy"],
    extras_require={
        "flint": ["python-flint"],
        "test": ["pytest", "pytest-timeout"],
    },
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["linear algebra", "exact arithmetic", "hermite normal form", "syzygies"],
    zip_safe=False,
)
