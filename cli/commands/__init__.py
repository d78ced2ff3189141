"""
CLI commands package
"""
