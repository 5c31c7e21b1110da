from setuptools import setup, find_packages

setup(
    name="xmlprompt",
    version="0.1.0",
    description="Terminal tool for building copyable XML prompt specifications",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "typer>=0.12.0,<0.26",
        "rich>=13.0.0",
        "prompt_toolkit>=3.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "xml-prompt=xmlprompt.main:xml_prompt",
        ],
    },
    python_requires=">=3.10",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
