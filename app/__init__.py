"""Read-only HTTP report of the environment snapshot"""
