from setuptools import setup, find_packages

with open("__version__.py") as f:
    exec(f.read())

with open("requirements.txt", "r") as fl:
    install_requirements = [x.strip() for x in fl.readlines() if x.strip()]

pkgs = find_packages(include=["transit_calendar", "transit_calendar.*"])

pkg_data = {"transit_calendar": ["./parameters.yml"]}

with open("README.md", "r") as fh:
    long_description = fh.read()

if __name__ == "__main__":
    setup(
        name="transit_calendar",
        version=release_version,  # noqa: F821
        install_requires=install_requirements,
        extras_require={"testing": ["pytest"]},
        packages=pkgs,
        package_dir={"": "."},
        package_data=pkg_data,
        zip_safe=False,
        description="Resolution of the services active on each date of a GTFS feed",
        long_description=long_description,
        long_description_content_type="text/markdown",
        classifiers=[
            "Programming Language :: Python",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
        ],
    )
