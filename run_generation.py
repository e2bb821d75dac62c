#!/usr/bin/env python3
"""
Main CLI entrypoint for the narrated clip generator.

This is a convenience wrapper that imports and runs the generation pipeline.
"""

import sys
from pathlib import Path

# Add project directory to path
sys.path.insert(0, str(Path(__file__).parent))

from clipgen.pipelines.run_generation import main

if __name__ == "__main__":
    sys.exit(main())
