"""
contractgen - synthesize shared client builder contracts from capability models.
"""

__version__ = "0.1.0"
