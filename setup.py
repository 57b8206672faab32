"""
scalarconf - flat scalar configuration stored as JSON or YAML.

This setup.py file is provided for pip install compatibility.
"""

from setuptools import setup

if __name__ == "__main__":
    setup(
        name="scalarconf",
        version="0.1.0",
        description="Flat string/int/bool configuration store with attribute access and JSON/YAML persistence.",
        long_description=open("README.md").read(),
        long_description_content_type="text/markdown",
        package_dir={"": "src"},
        packages=["scalarconf", "scalarconf.utils"],
        python_requires=">=3.9",
        install_requires=[
            "pydantic>=2.0",
            "PyYAML>=6.0",
        ],
        extras_require={
            "test": [
                "pytest>=7.4.0",
            ],
        },
        classifiers=[
            "Development Status :: 4 - Beta",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: Apache Software License",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
        ],
    )
