"""
Core app: users, roles and audit logging.
"""
