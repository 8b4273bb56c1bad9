"""Client-side mirror of a remote directory tree with status overlay and file selection"""
