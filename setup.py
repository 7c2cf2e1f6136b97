from setuptools import setup, find_packages

setup(
    name='nodejs-release-info',
    version='0.1.0',
    description='Resolve Node.js release artifacts (checksum and URL) by version and platform',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    python_requires='>=3.8',
    install_requires=[
        'requests',
        'aiohttp',
        'PyYAML',
        'platformdirs',
        'rich',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-asyncio',
            'pytest-mock',
        ],
    },
)
