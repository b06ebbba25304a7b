from setuptools import setup, find_namespace_packages

setup(
    name="puzzle_grid",
    version="0.1.0",
    packages=find_namespace_packages(include=["puzzle_grid*", "tools"]),
    package_data={"puzzle_grid.configs": ["*.yaml"]},
    install_requires=[
        "numpy",
        "PyYAML",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "grid_visualizer=tools.grid_visualizer:main",
        ]
    },
)
