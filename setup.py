from setuptools import setup, find_packages


setup(
    name="orientation",
    version="1.0.0",
    description="Single precision quaternion algebra for 3D rotations",
    packages=find_packages(include=["orientation", "orientation.*"]),
    python_requires=">=3.11",
    install_requires=[
        "numpy",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
