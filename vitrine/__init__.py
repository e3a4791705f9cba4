"""
Vitrine - cliente assíncrono para a API REST do marketplace.
"""

__version__ = "0.1.0"
