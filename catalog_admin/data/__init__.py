"""
Data models and validation for the admin client.
"""
