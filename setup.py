import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pynumerics",
    version="0.1.0",
    author="PyNumerics developers",
    description="Classic numerical methods: quadrature, linear systems, "
                "interpolation, root finding, ODEs and least-squares "
                "polynomial approximation.",
    install_requires=[
        'numpy'
    ],
    extras_require={
        'test': ['pytest', 'scipy'],
        'examples': ['matplotlib'],
    },
    keywords='numerical methods quadrature interpolation root finding',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['pynumerics',
                                               'pynumerics.*']),
    python_requires='>=3.10',
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Mathematics"
    ]
)
