"""
Local Django applications for the Le Paiper point-of-sale backend.
"""
