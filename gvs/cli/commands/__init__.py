"""Command implementations for the gvs CLI. Each module exposes ``run(args)``."""
