"""
DetailPro: back office for an auto-detailing business.
"""
__version__ = "1.0.0"
