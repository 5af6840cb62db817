from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="foodorder",
    version="0.1.0",
    author="Laurence Stephan",
    author_email="your.email@example.com",
    description="A Flask extension for viewing, editing and deleting food order records in a document store",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/foodorder",
    packages=find_packages(include=["foodorder", "foodorder.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Framework :: Flask",
    ],
    python_requires=">=3.9",
    install_requires=[
        "Flask>=3.0.0",
        "python-dotenv>=1.0.0",
        "pydantic>=2.0",
        "boto3>=1.28",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-flask>=1.2",
            "moto[dynamodb]>=5.0",
            "black>=22.0",
            "flake8>=5.0",
        ],
    },
    include_package_data=True,
    package_data={
        "foodorder": [
            "modules/*/templates/**/*.html",
        ],
    },
    zip_safe=False,
)
