"""HTTP service exposing world generation."""
