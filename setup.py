# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="combine-notes",
    version="1.0.0",
    description="Combine every markdown note under a folder into a single ordered document",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["combinenotes*"]),
    package_data={
        "combinenotes.interface.locales": ["*.json"],
    },
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "customtkinter",  # Preview window
        "pyperclip",  # Clipboard sink
        "pyuca",  # Unicode collation of note paths
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'combine-notes=combinenotes.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
