"""User identity service core.

This package manages the User, Credential, Address and VerificationToken
aggregates: mapping between persisted aggregates and their transfer objects,
keeping bidirectional ownership links consistent, merging partial updates and
coordinating cascading deletes.
"""

__version__ = "0.1.0"
