from setuptools import setup


requirements = [
    'parglare>=0.16',
    'pyrsistent',
    'attrs',
]

test_requirements = [
    'parameterized',
]

setup(
    name='cnfnorm',
    version='0.0.0',
    description='Conversion of context-free grammars into Chomsky normal form',
    license='MIT',
    keywords='grammar cfg chomsky-normal-form',
    packages=['cnfnorm'],
    scripts=[
        'bin/cnfnorm',
    ],
    python_requires='>=3.6',
    install_requires=requirements,
    tests_require=test_requirements + requirements,
    extras_require={
        'test': test_requirements,
    },
)
