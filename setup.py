from setuptools import setup, find_packages

setup(
    name="ukkonen_index",
    version="0.1.0",
    description="Suffix tree index built online with Ukkonen's algorithm",
    packages=find_packages(where='.', include=['ukkonen_index', 'ukkonen_index.*']),
    python_requires='>=3.10',
    install_requires=[
        'numpy>=1.19.0'
    ],
    extras_require={
        'test': ['pytest'],
        # benchmark.py at the repository root
        'benchmark': ['pandas', 'matplotlib', 'seaborn'],
    },
    zip_safe=False
)
