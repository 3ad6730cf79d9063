"""
Business logic for user accounts
"""
