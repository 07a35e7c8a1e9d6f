"""Identity bounded context: users, refresh tokens and password reset tokens."""
