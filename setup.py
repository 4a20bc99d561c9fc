from setuptools import setup, find_namespace_packages

setup(
    name="bookstore",
    version="0.1.0",
    packages=find_namespace_packages(include=['cli*', 'bookstore*']),
    include_package_data=True,
    install_requires=[
        "Click",
        "SQLAlchemy>=2.0",
        "python-dotenv",
    ],
    extras_require={
        "postgres": ["psycopg2-binary"],
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "bookstore=cli.main:main",
        ],
    },
)
