"""Account administration console.

Creates users in the accounts database and manages its schema migrations.
"""

__version__ = "0.1.0"
