from setuptools import find_packages, setup

setup(
    name="pyvatis",
    version="0.1.0",
    author="pyvatis developers",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    keywords=["weather", "metar", "aviation", "atis"],
    classifiers=[],
    license="Apache",
    description="METAR decoding for ATIS generation.",
    python_requires=">=3.9",
    install_requires=[
        "click",
        "numpy",
        "pydantic>=2",
        "regex",
    ],
    extras_require={
        "docs": ["autodoc_pydantic", "pydata-sphinx-theme", "sphinx"],
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "pyvatis-decode=pyvatis.cli:main",
        ],
    },
    include_package_data=True,
)
