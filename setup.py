from setuptools import setup, find_packages

setup(
    name='logexpfunctions',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    python_requires='>=3.8',
    install_requires=[
        'numpy',
    ],
    extras_require={
        'test': ['pytest'],
    },
    description='Numerically robust log/exp-domain special functions: softplus, log1pmx, logsumexp, softmax.',
    author='Jason Orender',
    author_email='jason@orender.net',
)
