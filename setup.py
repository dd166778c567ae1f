from setuptools import setup, find_packages

setup(
    name="object_verifier",
    version="0.1.0",
    description="Property type verification for data objects: verifier, type tags, logging, batch helpers.",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        'python-dotenv>=1.0.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    python_requires='>=3.9',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
