"""Pipeline entrypoints for the narrated clip generator."""

from clipgen.pipelines.run_generation import generate_clip, main, save_result

__all__ = ["generate_clip", "main", "save_result"]
