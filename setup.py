import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="notesweb",
    version="0.0.1",
    description="A small web application for keeping notes in a JSON file.",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    packages=setuptools.find_packages('src'),
    package_dir={'': 'src'},
    package_data={'notesweb': ['templates/*.mako']},
    entry_points={
        'console_scripts': [
            'notesweb = notesweb.cli:main'
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    install_requires=[
        'Flask>=2.2',
        'Mako>=1.1.3',
        'terminaltables',
    ],
    extras_require={
        'tests': [
            'beautifulsoup4>=4.9.1',
            'freezegun',
            'lxml',
            'pyfakefs',
            'pytest',
            'pytest-mock',
        ],
    },
    python_requires='>=3.7',
)
