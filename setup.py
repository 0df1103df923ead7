import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("requirements-dev.txt", "r") as fh:
    tests_require = [line for line in fh.read().splitlines() if line]

with open("requirements.txt", "r") as fh:
    install_requires = [line for line in fh.read().splitlines() if line]

setuptools.setup(
    name="regionspan",
    version="0.1.0.dev1",
    description="Regionspan - Bidirectional latency model of cloud region measurements",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_namespace_packages(include=['regionspan', 'regionspan.*']),
    include_package_data=True,
    setup_requires=['wheel'],
    test_suite="tests",
    tests_require=tests_require,
    install_requires=install_requires,
    extras_require={
        'test': tests_require,
    },
    python_requires='>=3.7',
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    entry_points={
        'console_scripts': [
            'regionspan-report = regionspan.cli.report:main',
        ],
    },

)
