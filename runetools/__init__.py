"""Font editing helpers: undo state, edit kinds, a small font model, virtual font tables, measurement and shape tools."""

__version__ = "0.1.0"