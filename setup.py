# setup.py
from setuptools import setup, find_packages

setup(
    name="logscribe",
    version="1.0.0",
    description="Embeddable typed file logger with level profiles and colored console echo",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),  # Encuentra automáticamente la carpeta 'logscribe'
    python_requires=">=3.8",
    install_requires=[
        "colorama>=0.4.6",  # Colores de consola (just_fix_windows_console)
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'logscribe=logscribe.interface.cli.app:main',  # Permite escribir entradas vía CLI
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
