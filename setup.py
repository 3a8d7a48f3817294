"""
Setup script for the school_service package.
"""
from setuptools import setup, find_packages

setup(
    name="school-classroom-service",
    version="1.0.0",
    description="Classroom management service: enrollment, staff assignment and classroom lifecycle",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.110.0",
        "pydantic>=2.5.0",
        "sqlalchemy>=2.0.0",
        "psycopg2-binary>=2.9.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "httpx>=0.24.0",
        ],
    },
)
