"""
Ledger - On-chain interaction layer for Secret DAO.

Provides JSON-RPC client, ABI loading, transaction utilities and the
contract client used by the bridge.

Uses httpx + eth-account + eth-abi instead of the heavyweight web3.py.
"""
