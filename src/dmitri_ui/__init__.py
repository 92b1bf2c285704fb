"""Window surface and command line for the dmitri picker."""
