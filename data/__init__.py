"""Reference datasets shipped with the package."""
