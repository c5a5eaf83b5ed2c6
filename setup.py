from setuptools import setup, find_packages

setup(
    name="css-compacter",
    version="1.0.0",
    packages=find_packages(),
    install_requires=[
        'chardet',
        'colorama',
        'orjson',
        'tqdm'
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov'
        ]
    },
    entry_points={
        'console_scripts': [
            'css-compacter=css_compacter.cli:main',
        ],
    },
    python_requires='>=3.8',
    author="Kenneth Hanks",
    author_email="fourfigs@gmail.com",
    description="A CSS normalizer that collapses, sorts, converts units and minifies stylesheets",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    url="https://github.com/fourfigs/css-compacter",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
