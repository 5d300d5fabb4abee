#!/usr/bin/env python
import os
import sys

# require python 3.9 or newer
if sys.version_info < (3, 9):
    print("Error: ormgen-timestampable does not support this version of Python.")
    print("Please upgrade to Python 3.9 or higher.")
    sys.exit(1)


# require version of setuptools that supports find_namespace_packages
from setuptools import setup

try:
    from setuptools import find_namespace_packages
except ImportError:
    # the user has a downlevel version of setuptools.
    print("Error: ormgen-timestampable requires setuptools v40.1.0 or higher.")
    print('Please upgrade setuptools with "pip install --upgrade setuptools" and try again')
    sys.exit(1)


# pull long description from README
this_directory = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(this_directory, "README.md"), "r", encoding="utf8") as f:
    long_description = f.read()


# get this package's version from ormgen/behaviors/timestampable/__version__.py
def _get_plugin_version() -> str:
    _version_path = os.path.join(
        this_directory, "ormgen", "behaviors", "timestampable", "__version__.py"
    )
    try:
        exec(open(_version_path).read())
        return locals()["version"]
    except IOError:
        print("Failed to load ormgen-timestampable version file for packaging.", file=sys.stderr)
        sys.exit(-1)


package_name = "ormgen-timestampable"
package_version = _get_plugin_version()
description = """The timestampable behavior plugin for ormgen code generation"""

setup(
    name=package_name,
    version=package_version,
    description=description,
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_namespace_packages(include=["ormgen", "ormgen.*"]),
    include_package_data=True,
    package_data={"ormgen.include.timestampable": ["templates/*.jinja"]},
    install_requires=[
        "dbt-adapters>=1.1.1,<2.0",
        "dbt-common>=1.0.4,<2.0",
        "Jinja2>=3.1.3",
        "pydantic>=2.0.0",
        "typing-extensions>=4.4.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    zip_safe=False,
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: MacOS :: MacOS X",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
)
