"""
Interest records: persistence, summary and HTTP endpoints.
"""
