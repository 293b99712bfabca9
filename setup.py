from setuptools import setup, find_packages

setup(
    name="ridemap",
    version="0.1.0",
    packages=find_packages(exclude=["*.tests", "*.tests.*"]),
    install_requires=[
        "numpy",
        "pandas",
        "shapely",
        "matplotlib",
        "seaborn",
        "networkx",
        "pydantic>=2",
        "fastapi",
        "uvicorn",
        "requests",
        "python-dotenv"
    ],
    extras_require={
        "test": [
            "pytest",
            "responses",
            "httpx"
        ]
    }
)
