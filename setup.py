from setuptools import setup

setup(
    name='atmfjstc-pretty-doc',
    version='1.0.0',

    author_email='atmfjstc@protonmail.com',

    package_dir={'': 'src'},
    packages=['atmfjstc.lib.pretty_doc'],

    install_requires=[
    ],

    extras_require={
        'test': [
            'pytest>=6',
        ],
    },

    zip_safe=True,

    description="A Wadler-style pretty printer for laying out documents within a given line width",

    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Code Generators",
        "Typing :: Typed",
    ],
    python_requires='>=3.7',
)
