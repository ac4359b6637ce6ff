from setuptools import setup

setup(
    name='diego_enabler',
    version='1.0.0',
    description='Lists Cloud Foundry apps with their Diego enablement status',
    long_description=open('README.md').read().strip(),
    long_description_content_type="text/markdown",
    license='Apache License Version 2.0',
    packages=['diego_enabler'],
    install_requires=['requests>=2.22.0'],
    extras_require={
        'test': ['responses', 'coverage', 'pytest'],
    },
    entry_points={
        'console_scripts': [
            'cf-diego-apps = diego_enabler.cli:main',
        ],
    },
)
