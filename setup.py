from setuptools import setup

setup(
    name="graphpoet",
    version="0.1.0",
    author="The graphpoet authors",
    description="Word affinity graphs and bridge-word poetry generation",
    license="MIT",
    packages=["graphpoet"],
    python_requires=">=3.7",
    install_requires=["PyYAML>=5.1", "watchdog>=2"],
    extras_require={"test": ["pytest>=6"]},
    entry_points={"console_scripts": ["graphpoet = graphpoet.cli:main"]},
)
