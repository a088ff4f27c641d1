from setuptools import setup, find_packages

setup(
    name='weth-helper',
    version='0.3.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    py_modules=['cli'],
    include_package_data=True,
    package_data={
        'contracts': ['abi/*.json'],
    },
    python_requires='>=3.9',
    install_requires=[
        'web3>=7',
        'click'
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-asyncio',
        ],
    },
    entry_points={
        'console_scripts': [
            'weth-helper = cli:cli',
        ],
    },
)
