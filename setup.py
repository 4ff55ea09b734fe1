from setuptools import setup, find_packages

setup(
    name="exactalgebra",
    version="0.1",
    description="Exact integer and rational arithmetic with compact and arbitrary-precision representations",
    long_description=("Exact integer and rational number tower for Python: values are never approximated until a "
                      "rounding is requested, small values live in packed 64-bit words, larger ones in "
                      "arbitrary-precision integers, with exact powers, roots with remainder and number theory"),
    long_description_content_type="text/plain",
    author="Philipp Schneider",
    author_email="zgddtgt@gmail.com",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["numpy", "sympy"],
    extras_require={
        "flint": ["python-flint"],
        "test": ["pytest", "pytest-timeout"],
    },
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["exact arithmetic", "rational numbers", "arbitrary precision", "number theory"],
    zip_safe=False,
)
