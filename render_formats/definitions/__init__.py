"""Built-in render format definitions, imported by load_builtin_formats()."""
