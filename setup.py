from setuptools import setup


setup(
    name='compose',
    version='0.1',
    description='Object composition and aspect-oriented advice without '
                'inheritance.',
    license='BSD',
    platforms=['any'],
    packages=['compose'],
    author='Alec Thomas',
    author_email='alec@swapoff.org',
    python_requires='>=3.8',
    extras_require={
        'test': [
            'pytest',
            'mock >= 0.5.0',
        ],
    },
    )
