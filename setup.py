import os
from setuptools import find_packages, setup


def main():
    def read(fname):
        with open(os.path.join(os.path.dirname(__file__), fname)) as _in:
            return _in.read()

    setup(
        name="Scratchnet",
        version="0.1",
        author="Stephen Hoover",
        author_email="Stephen.LD.Hoover hosted-on gmail.com",
        url="",
        description="Feed-forward neural networks computed neuron by neuron",
        packages=find_packages(),
        long_description=read('README.md'),
        long_description_content_type="text/markdown",
        python_requires=">=3.6",
        install_requires=[
            "matplotlib",
            "numpy",
            "pandas",
            "seaborn",
        ],
        extras_require={
            "test": ["pytest"],
        },
    )

if __name__ == "__main__":
    main()
