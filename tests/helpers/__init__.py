"""Test helper modules for the Gleam test suite.

- git_helpers: build throwaway repositories with the real git executable
"""
