"""Display-ready source excerpts for compiler diagnostics."""
