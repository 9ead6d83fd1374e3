# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="file-explorer",
    version="1.0.0",
    description="Explorador de archivos interactivo en memoria",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["file_explorer*"]),
    package_data={
        "file_explorer.interface": ["locales/*.json"],
    },
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'file-explorer=file_explorer.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
