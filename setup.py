import os
import re
from setuptools import setup, find_packages


def read(*parts):
    filename = os.path.join(os.path.dirname(__file__), *parts)
    with open(filename, encoding="utf-8") as fp:
        return fp.read()


def find_version(*file_paths):
    version_file = read(*file_paths)
    version_match = re.search(r"^VERSION = \((\d+), (\d+), (\d+)", version_file, re.M)
    if version_match:
        return ".".join(version_match.groups())
    raise RuntimeError("Unable to find version string.")


setup(
    name="django-cleancss",
    version=find_version("cleancss_filter", "__init__.py"),
    url="https://github.com/django-cleancss/django-cleancss",
    license="BSD",
    description="Minifies stylesheets by running them through clean-css.",
    long_description=read("README.rst"),
    author="django-cleancss authors",
    packages=find_packages(),
    install_requires=[
        "Django >= 3.2",
        "django-appconf >= 1.0.3",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-django",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Framework :: Django",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Internet :: WWW/HTTP",
    ],
    zip_safe=False,
)
