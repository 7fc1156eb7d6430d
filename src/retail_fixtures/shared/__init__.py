"""
Shared utilities and models for the retail fixture generator.
"""
