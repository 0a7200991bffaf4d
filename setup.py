# setup.py
from setuptools import setup, find_packages

setup(
    name="samlisp",
    version="0.1.0",
    description="A minimal Lisp-like expression interpreter with strict numeric types",
    python_requires=">=3.10",
    packages=find_packages(include=["samlisp", "samlisp.*", "samlisp_lsp", "samlisp_lsp.*"]),
    extras_require={
        "lsp": ["pygls>=1.1,<2", "lsprotocol"],
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "samlisp=samlisp.cli:main",
            "samlisp-ls=samlisp_lsp.server:main",
        ],
    },
    zip_safe=False,
)
