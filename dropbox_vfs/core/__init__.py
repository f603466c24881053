"""
Dropbox VFS Core

Infrastructure shared by the services:
- secrets: credential resolution (not exposed as tools)
"""
