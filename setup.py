from setuptools import setup, find_packages

setup(
    name="catr",
    version="0.1.0",
    description="Concatenate files to standard output with optional line numbering",
    packages=find_packages(include=["catr", "catr.*"]),
    install_requires=[
        "typer<0.26",
        "click",
        "rich",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "catr=catr.main:main",
        ],
    },
    python_requires=">=3.9",
)
