"""Infrastructure layer: Python AST host adapter and emission sinks."""
