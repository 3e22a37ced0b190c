"""
Wallet - key management and wallet providers for Secret DAO.
"""
