from qsslint.engine.engine import lint, lint_path, lint_paths, read_source

__all__ = ["lint", "lint_path", "lint_paths", "read_source"]
