from re import search
from setuptools import setup, find_packages

with open("src/graphql_directives/version.py") as version_file:
    version = search('version = "(.*)"', version_file.read()).group(1)

with open("README.md") as readme_file:
    readme = readme_file.read()

setup(
    name="graphql-directives",
    version=version,
    description="Directive handlers for GraphQL-core,"
    " middleware for fields annotated with custom directives.",
    long_description=readme,
    long_description_content_type="text/markdown",
    keywords="graphql directives middleware",
    license="MIT license",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    install_requires=["graphql-core>=3.2,<3.3"],
    extras_require={
        "test": ["pytest>=7", "pytest-asyncio>=0.21", "pytest-describe>=2"],
    },
    python_requires=">=3.8,<4",
    packages=find_packages("src"),
    package_dir={"": "src"},
    # PEP-561: https://www.python.org/dev/peps/pep-0561/
    package_data={"graphql_directives": ["py.typed"]},
    include_package_data=True,
    zip_safe=False,
)
