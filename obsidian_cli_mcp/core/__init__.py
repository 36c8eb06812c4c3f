"""Core CLI delegation: argument building, process execution and output handling."""
