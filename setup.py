import setuptools

import powerprompt.version

with open("README.md", "r") as readme:
    long_description = readme.read()

setuptools.setup(
    name='powerprompt',
    version=powerprompt.version.VERSION,
    description='A powerline-style prompt for bash and zsh',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages('.', include=['powerprompt', 'powerprompt.*']),
    scripts=['bin/powerprompt'],
    install_requires=['psutil'],
    extras_require={
        'test': ['pytest', 'dill']
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Operating System :: POSIX :: Linux',
        'Operating System :: MacOS'
    ],
    python_requires='>=3.8'
)
