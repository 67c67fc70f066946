"""Core plumbing: enumerations, errors, configuration and document I/O."""
