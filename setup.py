from setuptools import setup, find_packages

setup(
    name="metar_wx",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "requests>=2.25.1",
        "pandas>=1.2.0",
        "python-dateutil>=2.8.1",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "black>=21.0",
            "mypy>=0.900",
            "flake8>=3.9.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "metar-wx=metar_wx.cli:main",
        ]
    },
    author="Brice Rosenzweig",
    author_email="brice@rosenzweig.io",
    description="A library for decoding METAR aviation weather reports into structured observations",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    url="https://github.com/brice/metar_wx",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.8",
)
