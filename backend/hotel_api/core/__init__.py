"""
Core application modules.
Contains essential infrastructure components:
- bootstrap: Application initialization and default admin creation
- db: Database configuration and connection management
- errors: Error taxonomy rendered as JSON error responses
- security: Password hashing, JWT tokens and the decoded identity
"""
