"""Install the cluster registration auth proxy."""

from setuptools import setup, find_packages

setup(
    name='uhc-auth-proxy',
    version='0.1.0',
    packages=find_packages(exclude=['*test*']),
    install_requires=[
        "flask",
        "werkzeug",
        "requests",
        "python-json-logger",
    ],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=False
)
