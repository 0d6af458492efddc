from setuptools import find_namespace_packages, setup

# Physical structure matches import path
packages = find_namespace_packages(where="../..", include=["hueprint.cli", "hueprint.cli.*"])

setup(
    packages=packages,
    package_dir={"": "../.."},
    entry_points={"console_scripts": ["hueprint = hueprint.cli.main:main"]},
)
