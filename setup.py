from setuptools import setup, find_packages

setup(
    name='railticket',
    version='0.1.0',
    packages=find_packages(exclude=['tests']),
    python_requires='>=3.9',
    install_requires=[
        'regex',
        'pdfminer.six',
        'python-dateutil',
        'PyYAML',
        'click',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'railticket=railticket.cli:main'
        ]
    }
)
