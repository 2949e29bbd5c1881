"""
Build script for wxjsx with optional mypyc compilation.

Usage:
    # Pure Python build (default)
    python -m build

    # Compiled with mypyc
    WXJSX_USE_MYPYC=1 pip install .
"""

import os
import sys
from pathlib import Path

from setuptools import find_packages, setup

# Determine if we should use mypyc
USE_MYPYC = os.environ.get("WXJSX_USE_MYPYC", "0") == "1"

# Modules on the compile path; __main__.py and compiler.py stay interpreted.
MYPYC_MODULES = [
    "src/wxjsx/tokenizer.py",
    "src/wxjsx/treebuilder.py",
    "src/wxjsx/generator.py",
]


def build_with_mypyc() -> list:
    """Build extension modules using mypyc."""
    try:
        from mypyc.build import mypycify
    except ImportError:
        print(
            "ERROR: mypyc is not installed. Install with: pip install mypy",
            file=sys.stderr,
        )
        print("Or install with mypyc support: pip install wxjsx[mypyc]", file=sys.stderr)
        sys.exit(1)

    for module_path in MYPYC_MODULES:
        if not Path(module_path).exists():
            print(f"ERROR: Module not found: {module_path}", file=sys.stderr)
            sys.exit(1)

    print("=" * 70)
    print("Building wxjsx with mypyc compilation")
    print("=" * 70)
    print(f"Compiling {len(MYPYC_MODULES)} modules:")
    for module in MYPYC_MODULES:
        print(f"  - {module}")
    print("=" * 70)

    opt_level = os.environ.get("MYPYC_OPT_LEVEL", "3")
    debug_level = os.environ.get("MYPYC_DEBUG_LEVEL", "0")

    mypyc_options = {
        "opt_level": opt_level,
        "debug_level": debug_level,
        "verbose": True,
        "separate": False,
        "multi_file": False,
    }

    return mypycify(MYPYC_MODULES, **mypyc_options)


ext_modules = []

if USE_MYPYC:
    ext_modules = build_with_mypyc()

setup(
    name="wxjsx",
    version="0.1.0",
    description="Compile mini-program markup into component markup",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    extras_require={
        "test": ["pytest"],
        "mypyc": ["mypy"],
    },
    entry_points={
        "console_scripts": ["wxjsx = wxjsx.__main__:main"],
    },
    ext_modules=ext_modules,
)
