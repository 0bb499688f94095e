from setuptools import setup

with open("README.md", 'r') as f:
    long_description = f.read()

setup(
   name='bgw',
   version='1.0',
   description='Pairing-based broadcast encryption with constant-size headers (BGW)',
   license="GPL",
   long_description=long_description,
   long_description_content_type='text/markdown',
   packages=['bgw'],
   python_requires='>=3.6',
   install_requires=[
        'petrelic>=0.1.5',
       ], #external packages as dependencies
   extras_require={
        'test': ['pytest'],
        'bench': ['numpy'],
       },
)
