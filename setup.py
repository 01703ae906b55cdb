# Usage: python setup.py bdist_wheel

import setuptools  # type: ignore

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name='logictool',
    version='0.1.0',
    author="LogicTool developers",
    description="Evaluation, normal forms and equivalence of boolean functions",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(
        exclude=['tests']
    ),
    python_requires='>=3.11',
    install_requires=[
        'sympy',
        'typing_extensions',
        'IPython'
    ],
    extras_require={
        'test': ['pytest']
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
