"""
Setup script for job-application-tracker project.

Allows development installation with `pip install -e .`
"""

from setuptools import setup, find_packages

setup(
    name="job-application-tracker",
    version="1.0.0",
    packages=find_packages(include=["src", "src.*", "tracker_service", "tracker_service.*", "frontend", "frontend.*"]),
    py_modules=["version"],
    package_data={"frontend": ["templates/*.html"]},
    python_requires=">=3.11",
    install_requires=[
        "fastapi",
        "uvicorn",
        "pydantic>=2",
        "pydantic-settings>=2",
        "pymongo",
        "python-dotenv",
        "flask",
        "requests",
        "beautifulsoup4",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "job-tracker-api=tracker_service.app:main",
            "job-tracker-ui=frontend.app:main",
        ],
    },
)
