import os.path as op

from setuptools import setup


with open(op.join(op.dirname(__file__), './README.md')) as fin:
    long_description = fin.read()


setup(
        name='wcpan.drive.rest',
        version='1.0.0',
        author='Wei-Cheng Pan',
        author_email='legnaleurc@gmail.com',
        description='Asynchronous Google Drive v3 REST binding.',
        long_description=long_description,
        long_description_content_type='text/markdown',
        url='https://github.com/legnaleurc/wcpan.drive.rest',
        packages=[
            'wcpan.drive.rest',
            'wcpan.drive.rest._api',
        ],
        python_requires='>= 3.12',
        install_requires=[
            'PyYAML >= 6.0',
            'aiohttp >= 3.9',
            'wcpan.drive.core >= 2.0',
            'yarl >= 1.9',
        ],
        entry_points={
            'console_scripts': [
                'wdr = wcpan.drive.rest.__main__:run',
            ],
        },
        classifiers=[
            'Programming Language :: Python :: 3 :: Only',
            'Programming Language :: Python :: 3.12',
        ])
