"""
Sales app: the checkout transaction and sales history.
"""
