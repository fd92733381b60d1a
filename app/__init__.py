"""HTTP host for the string literal finder."""
