from setuptools import setup


TESTS_REQUIRE = [
    'pytest',
    'pytest-cov',
    'coverage',
    'flake8',
    'bandit',
    'mypy',
]


setup(
    name='evalexpr',
    use_scm_version={
        # Building from an sdist or plain checkout, without VCS metadata.
        'fallback_version': '0.1.0',
    },
    description='Embeddable infix arithmetic expression evaluator',
    install_requires=[
        'regex',
    ],
    python_requires='>=3.11',
    packages=['evalexpr'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    extras_require={
        'test': TESTS_REQUIRE,
    },
    license='ISC',
)
