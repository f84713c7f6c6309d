import setuptools


with open("README.md", "r") as readme_file:
    readme = readme_file.read()

setuptools.setup(
    name="stripes39",
    version="0.1.0",
    author="Petr Machek",
    description="Code 39 barcode generator with no dependencies",
    long_description=readme,
    long_description_content_type="text/markdown",
    url="https://github.com/pmachek/barcode",
    packages=setuptools.find_packages("src"),
    package_dir={"": "src"},
    extras_require={
        "tests": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.6"
)
