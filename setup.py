import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="safenewton",
    version="0.1.0",
    author="Eric J. Whitney",
    author_email="eric.j.whitney@optusnet.removethispart.com.au",
    description="Safeguarded Newton-Raphson / bisection root finding for "
                "scalar functions.",
    include_package_data=True,
    install_requires=[
        'numpy', 'scipy'
    ],
    extras_require={
        'test': ['pytest'],
        'doc': ['sphinx', 'pydata-sphinx-theme'],
    },
    keywords='root finding newton bisection numerical',
    long_description=long_description,
    long_description_content_type="text/markdown",
    setup_requires=["numpy"],
    packages=setuptools.find_packages(include=['safenewton',
                                               'safenewton.*']),
    python_requires='>=3.10',
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Mathematics"
    ]
)
