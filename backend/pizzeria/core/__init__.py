"""
Core application modules.
Contains essential infrastructure components:
- credentials: User lookup and creation with hashed passwords
- db: Database configuration and connection management
- errors: Error taxonomy and its HTTP mapping
- security: Password hashing and access token issuance/verification
"""
