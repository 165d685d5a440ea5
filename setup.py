from setuptools import find_packages, setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="sway-autotile",
    version="0.1",
    description="Automatic split orientation for sway and i3",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "orjson",
    ],
    extras_require={
        "test": ["pytest", "pytest-asyncio"],
    },
    python_requires=">=3.11",
    package_data={
        "sway_autotile": ["settings.json"],
    },
    entry_points={
        "console_scripts": ["sway-autotile=sway_autotile.run:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
    ],
)
