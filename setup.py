from setuptools import setup, find_namespace_packages

setup(
    name='parkmap',
    version='0.1.0',
    description='Parking availability map backend',
    author='parkmap contributors',
    packages=find_namespace_packages(include=['parkmap', 'parkmap.*']),
    python_requires='>=3.8',
    install_requires=[
        'tornado>=6.0',
        'attrs>=20.3',
        'asyncpg>=0.21',
        'testing.postgresql>=1.3',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-asyncio>=0.23',
            'pytest-mock>=3.0',
        ],
    },
)
