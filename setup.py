from setuptools import find_packages, setup

classifiers = [
    "Environment :: Console",
    "License :: OSI Approved :: MIT License",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.8",
    "Programming Language :: Python :: 3.9",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3 :: Only",
    "Topic :: Software Development :: Libraries",
    "Topic :: Terminals",
    "Topic :: Text Processing :: Filters",
]

with open("README.md", "r") as fp:
    long_description = fp.read()

setup(
    name="term-tags",
    version="0.1.0",
    author="Toluwaleke Ogundipe",
    author_email="anonymoux47@gmail.com",
    description="Convert color tags in text to terminal escape sequences",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=classifiers,
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=["typing_extensions>=4.0"],
    extras_require={"test": ["pytest"]},
    keywords=[
        "terminal",
        "console",
        "color",
        "colour",
        "tags",
        "ANSI",
        "SGR",
        "escape sequences",
        "xterm",
        "256-color",
        "truecolor",
        "library",
    ],
)
