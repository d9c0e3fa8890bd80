from setuptools import setup, find_packages
import re

# Read version from ltdcalc/__init__.py
with open('ltdcalc/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='ltd-calc',
    version=version,
    packages=find_packages(include=['ltdcalc', 'ltdcalc.*']),
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.0.0',
        'rich>=13.0',
    ],
    extras_require={
        'mcp': [
            'mcp[cli]>=1.0.0,<2',
        ],
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'ltd-calc=ltdcalc.cli.__main__:main',
            'ltd-calc-mcp=ltdcalc.mcp.server:run_server',
        ],
    },
    author='Personal',
    description='Limited company take-home, pension projection and tax efficiency calculator.',
    python_requires='>=3.10',
)
