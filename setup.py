from setuptools import setup, find_packages
setup(
    name="collision_store",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["server"],
    install_requires=["flask", "flask-cors", "xxhash"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.9",
)
