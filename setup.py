import os

from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))
readme_path = os.path.join(here, "README.md")
long_description = open(readme_path, encoding="utf-8").read() if os.path.exists(readme_path) else ""

setup(
    name="profile-ocr",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "fastapi>=0.100.0",
        "uvicorn>=0.15.0",
        "python-multipart>=0.0.6",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "python-dotenv>=0.19.0",
        "requests>=2.26.0",
        "openai>=1.0.0",
        "psutil>=5.8.0",
    ],
    extras_require={
        "dashboard": [
            "streamlit>=1.29.0",
            "pandas>=1.3.0",
        ],
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "httpx>=0.24.0",
        ],
    },
    python_requires=">=3.9",
    description="Creator profile extraction from social media screenshots",
    long_description=long_description,
    long_description_content_type="text/markdown",
    entry_points={
        "console_scripts": [
            "profile-ocr-api=profile_ocr.services.ocr.main:main",
        ],
    },
)
