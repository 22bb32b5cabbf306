"""
Source checkout entry point.

Runs the rn-toolbox CLI without installing the package:
    python main.py icons --appName MyApp
"""
import sys
import os

# Add src to path so rn_toolbox package is importable
src_path = os.path.join(os.path.dirname(__file__), "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from rn_toolbox.cli_main import main

if __name__ == "__main__":
    main()
