from setuptools import find_packages, setup  # noqa

extras_require = {
    "test": [
        "mock",
        "pytest",
    ],
}

__version__ = "0.0.0+develop"

setup(
    name="authtls",
    version=__version__,
    maintainer="authtls Contributors",
    packages=find_packages(
        include=["authtls", "authtls.*"],
        exclude=["tests*"],
    ),
    include_package_data=True,
    description="Authentication and TLS options for remote cache and execution clients",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    entry_points={
        "console_scripts": [
            "authtls=authtls.clis.main:main",
        ]
    },
    install_requires=[
        # Please maintain an alphabetical order in the following list
        "click>=8.0,<9.0",
        "dataclasses-json>=0.5.2",
        "python-json-logger>=2.0.0",
        "pytimeparse>=1.1.8,<2.0.0",
        "rich",
        "rich_click",
    ],
    extras_require=extras_require,
    license="apache2",
    python_requires=">=3.8",
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development",
        "Topic :: Software Development :: Libraries",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
