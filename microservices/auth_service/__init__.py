"""
Auth Service - Credential check and access token issuance
"""

__version__ = "1.0.0"
