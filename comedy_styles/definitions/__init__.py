"""Built-in comedic style definitions (one module per style)."""
