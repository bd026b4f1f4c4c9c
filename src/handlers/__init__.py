"""HTTP entrypoints; each module exposes ``lambda_handler``."""
