from setuptools import setup, Extension, find_packages
from Cython.Build import cythonize

# The bit-packing kernels are plain Python compiled with Cython
extensions = [
    Extension(
        "packed_dna.codec",
        ["src/packed_dna/codec.py"],
        include_dirs=[],
        language="c",
    ),
]

setup(
    name="packed-dna",
    version="0.1.0",
    description="Memory efficient nucleotide sequences stored at 2 bits per base",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "nuccount = packed_dna.cmd:main",
        ],
    },
    ext_modules=cythonize(
        extensions,
        compiler_directives={
            'language_level': 3,
            'boundscheck': True,  # Enable bounds checking for safety
            'wraparound': False,
            'cdivision': True,
            'nonecheck': False,
        }
    ),
    zip_safe=False,
)
