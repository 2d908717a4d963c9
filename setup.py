from setuptools import setup

setup(
    name='bitstrm',
    version='1.0.0',
    url='',
    license='AGPL-3.0-only',

    author='Tancredi Orlando',
    author_email='tancredi.orlando@gmail.com',

    description='Bit streams for Python.',
    long_description='',

    packages=['bitstrm'],

    python_requires='>3.10',

    extras_require={
        'dev': [
            'mypy>=0.991',
            'flake8>=5.0.4',
            'pytest>=7.2.0'
        ]
    },

    entry_points={
        'console_scripts': [
            'bitstrm = bitstrm.__main__:main'
        ]
    }
)
