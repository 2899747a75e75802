from setuptools import setup, find_namespace_packages
import os

here = os.path.abspath(os.path.dirname(__file__))
README = open(os.path.join(here, 'README.md')).read()
NEWS = open(os.path.join(here, 'NEWS.txt')).read()


version = '0.0.1'

install_requires = [
    'bigfloat',
]

test_requires = [
    'pytest',
]

setup(
    name='bcdcordic',
    version=version,
    description="CORDIC sin/cos on fixed-point BCD arithmetic",
    long_description=README + '\n\n' + NEWS,
    long_description_content_type='text/markdown',
    classifiers=[
        "Topic :: Scientific/Engineering :: Mathematics",
        "License :: OSI Approved :: GNU Lesser General Public License v2 or later (LGPLv2+)",
        "Programming Language :: Python :: 3",
    ],
    keywords='cordic bcd fixed-point decimal',
    license='LGPLv2+',
    packages=find_namespace_packages('src'),
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.6',
    install_requires=install_requires,
    tests_require=test_requires,
    extras_require={'test': test_requires},
)
