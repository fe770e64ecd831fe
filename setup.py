from setuptools import setup, find_packages

install_requires = [
    # --- UI & REACTIVE ---
    # FletXr is published as pre-releases; pip picks them up when no final release exists
    "flet>=1.0.0",
    "FletXr>=0.1.5",

    # --- CONFIGURATION ---
    "pydantic>=2.0.0",
    "python-dotenv>=1.0.0",
    "pyyaml>=6.0.0",
]

setup(
    name="ListEdit",
    version="0.1.0",
    description="ListEdit - a single-page list editor",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=install_requires,
    extras_require={
        # --- TESTS ---
        "test": [
            "pytest",
            "pytest-asyncio==1.3.0",
        ],
    },
    python_requires=">=3.11",
)
