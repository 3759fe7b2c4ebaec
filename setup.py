import os.path

from setuptools import find_packages, setup

with open(os.path.join(os.path.dirname(__file__), 'README.md')) as f:
    LONG_DESCRIPTION = f.read()
    DESCRIPTION = LONG_DESCRIPTION.splitlines()[0].lstrip('#').strip()

setup(
    name='kubefix',
    version='0.1.0',

    description=DESCRIPTION,
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    keywords=['kubernetes', 'testing', 'fixtures', 'kubectl', 'python', 'k8s'],
    license='MIT',
    classifiers = [
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: POSIX',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: Implementation :: CPython',
        'Framework :: Pytest',
        'Topic :: Software Development :: Testing',
    ],

    zip_safe=True,
    packages=find_packages(include=['kubefix', 'kubefix.*']),
    include_package_data=True,
    entry_points={
        'console_scripts': [
            'kubefix = kubefix.cli:main',
        ],
    },

    python_requires='>=3.10',
    install_requires=[
        'kubernetes',           # 40.0 MB (!)
        'urllib3',              # 0.40 MB, already required by kubernetes
        'click',                # 0.60 MB
        'pyyaml',               # 0.90 MB
        'python-json-logger>=3.1',  # 0.05 MB
    ],
    extras_require={
        'dev': [
            'pytest',
            'pytest-mock',
        ],
    },
    package_data={"kubefix": ["py.typed"]},
)
