"""
CRM app: shop clients and their loyalty aggregates.
"""
