"""Utility functions for the narrated clip generator."""

from clipgen.utils.io_utils import create_run_output_dir, parse_data_uri, slugify, write_data_uri

__all__ = [
    "create_run_output_dir",
    "parse_data_uri",
    "slugify",
    "write_data_uri",
]
