from setuptools import setup, find_packages

setup(
    name="intakepro",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "python-dotenv",
        "pydantic>=2",
        "typing-extensions"
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'intakepro=intakepro.main:main',
        ],
    },
    author="Warmsley Walker",
    description="Case intake questionnaire engine: conditional questions, rights recommendations and completion scoring",
    python_requires=">=3.9",
)
