"""
Infrastructure layer package.

Adapters implementing domain ports against real data sources.
"""
