from setuptools import setup, find_packages

setup(
    name="avl-replay",
    version="0.1.0",
    description="AVL tree engine that records a replayable snapshot of every structural change",
    author="adamfilli",
    packages=find_packages(include=["avlreplay", "avlreplay.*"]),
    install_requires=[
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
