import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="zerofun",
    version="0.1.0",
    description="Root finding methods for scalar functions.",
    install_requires=[
        'numpy', 'pyyaml'
    ],
    extras_require={
        'test': ['pytest', 'scipy']
    },
    keywords='root finding bisection brent newton secant',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['zerofun', 'zerofun.*']),
    entry_points={
        'console_scripts': ['zerofun = zerofun.cli:main']
    },
    python_requires='>=3.10',
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Mathematics"
    ]
)
