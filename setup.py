import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="freesound-models",
    version="0.1.0",
    description="Freesound API sound models with JSON and binary codecs",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://freesound.org/docs/api/",
    install_requires=[
        "dataclasses-json >= 0.5.7",
        "dateparser >= 1.1.0, < 2",
    ],
    extras_require={
        "test": ["pytest >= 7"],
    },
    packages=setuptools.find_packages(exclude=["*.tests", "*.tests.*"]),
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
