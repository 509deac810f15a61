"""Entry point for `generate-assets`: runs tools/generate_assets.py.

Only works from a source checkout (e.g. `pip install -e .`): the tools/
directory and the assets/ it writes are not part of an installed wheel.
"""
import os
import runpy
import sys

_SCRIPT = os.path.normpath(os.path.join(
    os.path.dirname(os.path.abspath(__file__)), os.pardir, os.pardir, "tools", "generate_assets.py"
))


def main():
    if not os.path.isfile(_SCRIPT):
        sys.exit(f"generate-assets needs a source checkout; {_SCRIPT} is missing")
    sys.argv = [_SCRIPT]
    runpy.run_path(_SCRIPT, run_name="__main__")
