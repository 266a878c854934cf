from setuptools import find_packages, setup

setup(
    name='visppc',
    packages=find_packages(exclude=['tests', 'tests.*']),
    version='0.0.1',
    description='Faithful visualizations for posterior predictive checks: PIT-ECDF bands, quantile dot plots, rootograms, and CORP reliability diagrams.',
    author='Timothy Brathwaite',
    license='MIT',
    install_requires=[
        'numpy',
        'scipy',
        'pandas',
        'matplotlib',
        'seaborn',
        'statsmodels',
        'scikit-learn',
        'tqdm',
        'attrs',
    ],
    extras_require={
        'test': ['pytest'],
        'notebooks': ['jupyter', 'jupytext', 'ipywidgets'],
    },
)
