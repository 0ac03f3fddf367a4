"""create-ts-project -- scaffold a new TypeScript project from a bundled template."""

__version__ = "0.1.0"
