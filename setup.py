from setuptools import setup, find_packages

setup(
    name="location-checker",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.21.0",
        "pandas>=1.5.0",
        "geopandas>=0.9.0",
        "shapely>=2.0.0",
        "pyproj>=3.0.0",
        "folium>=0.14.0",
        "python-dotenv>=0.19.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "location-checker=location_checker.main:main",
        ],
    },
)
