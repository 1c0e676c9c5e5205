"""Application layer: checkers and reporters."""
