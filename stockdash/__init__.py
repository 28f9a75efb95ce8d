"""
StockDash

Technical-indicator engine for the stock dashboard.
"""

__version__ = "0.1.0"
