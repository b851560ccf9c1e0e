from setuptools import setup, find_packages

setup(
    name="pleeease",
    version="4.0.0",
    packages=find_packages(),
    install_requires=[
        'csscompressor',
        'aiofiles',
        'orjson',
        'typing-extensions'
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'pytest-xdist',
            'pytest-timeout',
        ],
    },
    entry_points={
        'console_scripts': [
            'pleeease=pleeease.cli:main',
        ],
    },
    python_requires='>=3.8',
    description="Process CSS with a single set of options: prefixes, fallbacks and minification",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
