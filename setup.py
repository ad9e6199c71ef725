import pathlib
import re
from setuptools import setup

here = pathlib.Path(__file__).parent
init = here / "rockserver_scan" / "__init__.py"
readme_path = here / "README.md"

with open(here / "requirements.txt", encoding="utf-8") as r:
    requires = [i.strip() for i in r if i.strip()]

with init.open() as fp:
    try:
        version = re.findall(r"^__version__ = '([^']+)'$", fp.read(), re.M)[0]
    except IndexError:
        raise RuntimeError('Unable to determine version.')


with readme_path.open() as f:
    README = f.read()

setup(
    name='rockserver-scan',
    version=version,
    description='range scan descriptors for rockserver column family stores',
    long_description=README,
    long_description_content_type='text/markdown',
    author='Andrea Cavalli',
    author_email='nospam@warp.ovh',
    packages=["rockserver_scan", ],
    classifiers=[
        "Operating System :: OS Independent",
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires='>=3.8.0',
    install_requires=requires,
    extras_require={
        'test': ['pytest'],
    },
)
