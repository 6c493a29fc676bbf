"""Setup file for the productlist package."""
from setuptools import setup, find_packages

setup(
    name="productlist",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "streamlit>=1.37",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "loguru>=0.7",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.1.1",
        ],
    },
    python_requires=">=3.9",
)
