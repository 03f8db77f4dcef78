"""System dependency installer for building MOOS-IvP on Linux."""
