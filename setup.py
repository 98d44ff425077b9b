import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()


exec(open('version.py').read())
release = __version__
version = '.'.join(release.split('.')[:2])


setuptools.setup(
    name="sdptool",
    version=release,
    description="Analysis and Evaluation of Semantic Dependency Graphs",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_namespace_packages(
        include=["codec", "score", "validate"]),
    py_modules=["graph", "analyzer", 'main', 'version'],
    license='LGPL-3.0',
    python_requires=">=3.7",
    install_requires=[
        'numpy',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points = {
        'console_scripts': ['sdptool=main:main'],
    },
    classifiers=[
        "Environment :: Console",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "Intended Audience :: Science/Research",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
        "Topic :: Scientific/Engineering :: Information Analysis"
    ]
)
