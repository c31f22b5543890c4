from pathlib import Path
from typing import Dict

from setuptools import find_packages, setup

# Setup file based on https://github.com/pypa/sampleproject/blob/master/setup.py
root_path = Path(__file__).parent.absolute()


def get_long_description() -> str:
    path_to_readme = root_path / "README.md"
    return path_to_readme.read_text()


def get_project_info() -> Dict[str, str]:
    project_info: Dict[str, str] = {}
    project_info_path = root_path / "openssl_to_rfc" / "__version__.py"
    exec(project_info_path.read_text(), project_info)
    return project_info


project_info = get_project_info()


setup(
    name=project_info["__title__"].lower().replace("_", "-"),
    version=project_info["__version__"],
    description=project_info["__description__"],
    url=project_info["__url__"],
    author=project_info["__author__"],
    author_email=project_info["__author_email__"],
    license=project_info["__license__"],
    python_requires=">=3.9",
    # Pypi metadata
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: GNU Affero General Public License v3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Networking",
        "Topic :: Security",
    ],
    keywords="ssl tls cipher suite openssl rfc names",
    # Package info
    packages=find_packages(include=["openssl_to_rfc", "openssl_to_rfc.*"]),
    package_data={"openssl_to_rfc": ["py.typed"]},
    entry_points={"console_scripts": ["openssl-to-rfc = openssl_to_rfc.__main__:main"]},
    # Dependencies
    install_requires=[
        "pydantic>=2.2,<3.0",
    ],
    extras_require={
        "tests": ["pytest", "pytest-cov"],
        "dev": ["pytest", "pytest-cov", "invoke", "flake8", "mypy", "black", "twine"],
    },
)
