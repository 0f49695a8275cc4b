"""Presentation engine: grammars, lexer, decorative lines, reflow, rendering."""
