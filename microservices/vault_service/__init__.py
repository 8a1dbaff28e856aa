"""
Vault Service - Encrypted secret storage

Stores named secret values, each encrypted at rest with AES-256-CBC and its
own random IV, behind short-lived bearer tokens.
"""

__version__ = "1.0.0"
