from setuptools import setup, find_packages

package_name = 'piecewise_linear'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(include=[package_name, package_name + '.*']),
    install_requires=[
        'setuptools',
        'numpy',
    ],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    author='Piecewise Linear Team',
    author_email='piecewise-linear@example.com',
    description='Pure Python piecewise-linear interpolation and exact integration',
    license='MIT',
    python_requires='>=3.8',
    tests_require=['pytest'],
)
