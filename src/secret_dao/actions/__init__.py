"""
Actions - command implementations for Secret DAO.

Each module corresponds to top-level CLI commands:
- initialize: Become the contract administrator
- transfer:   Transfer hidden assets
- propose:    Create a secret proposal
- ballot:     Vote on / execute a proposal
- assets:     Query concealed asset balances
- trigger:    Run the action bound to a UI element id
"""
