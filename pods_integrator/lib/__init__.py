"""
Shared infrastructure
"""
