"""
Inventory app: the product catalog and its stock levels.
"""
