from setuptools import find_packages, setup

from motor_examples import version


def parse_reqs_file(fname):
    with open(fname) as fid:  # noqa:PTH123
        lines = [li.strip() for li in fid.readlines()]
    return [li for li in lines if li and not li.startswith("#")]


extras_require = dict(  # noqa:C408
    test=parse_reqs_file("requirements/test-requirements.txt"),
)

setup(
    name="motor-examples",
    version=version,
    description="Documentation examples for Motor with asyncio, and the tests behind them",
    license="Apache License, Version 2.0",
    packages=find_packages(exclude=["test", "test.*"]),
    python_requires=">=3.8",
    install_requires=parse_reqs_file("requirements.txt"),
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "motor-examples-snippets=motor_examples.snippets:main",
        ],
    },
)
