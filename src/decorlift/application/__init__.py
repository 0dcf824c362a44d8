"""Application layer: desugaring services and reporters."""
