from setuptools import setup
import os

from xlscore.info import __VERSION__

project_dir = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(project_dir, 'README.md')) as f:
    long_description = f.read()

setup(
    name = 'xlscore',
    version = __VERSION__,
    author = 'Amirreza Niakanlahiji',
    author_email = 'aniak2@uis.edu',
    packages = ['xlscore'],
    description = (
        'Byte readers, column labels and the built-in function table '
        'for decoding Microsoft Excel binary (xls/xlsb) formulas'
    ),
    long_description = long_description,
    long_description_content_type = 'text/markdown',
    platforms = ["Any platform -- don't need Windows"],
    license = 'Apache License 2.0',
    keywords = ['xls', 'xlsb', 'excel', 'spreadsheet', 'formula', 'biff'],
    classifiers = [
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'Topic :: Office/Business',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    extras_require = {
        'test': ['pytest'],
    },
    python_requires=">=3.6",
)
