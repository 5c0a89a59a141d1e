from setuptools import setup, find_packages

setup(
    name="cag",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "openai>=1.3.0",
        "replicate>=0.25.0",
        "langchain-text-splitters>=0.2.0",
        "pyyaml>=6.0.1",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.3",
            "pytest-asyncio>=0.21.1",
        ],
    },
    python_requires=">=3.10",
    description="Chunked Augmented Generation: run language models over text larger than their context window",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
