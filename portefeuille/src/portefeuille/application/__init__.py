"""Application layer: wallet lifecycle, modules and registry."""
