from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pathrules",
    version="0.3.0",
    author="Andrey Golovanov",
    description="Byte-level path algebra with interchangeable POSIX and Windows rule-sets.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "dev", "examples")),
    package_data={"pathrules": ["schemas/*.json"]},
    python_requires=">=3.10",
    install_requires=["PyYAML", "jsonschema"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["pathrules=pathrules.cli:main"]},
)
