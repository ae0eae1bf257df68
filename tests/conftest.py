"""Test configuration and fixtures."""

import os

import logfire

# Settings are read from the environment; tests run with both providers on
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret-with-enough-length-for-hs256")
os.environ.setdefault("AUTH__GITHUB__ENABLED", "true")
os.environ.setdefault("AUTH__GITHUB__CLIENT_ID", "test-github-client")
os.environ.setdefault("AUTH__GITHUB__CLIENT_SECRET", "test-github-secret")
os.environ.setdefault("AUTH__FACEBOOK__ENABLED", "true")
os.environ.setdefault("AUTH__FACEBOOK__CLIENT_ID", "test-facebook-client")
os.environ.setdefault("AUTH__FACEBOOK__CLIENT_SECRET", "test-facebook-secret")

logfire.configure(send_to_logfire=False, console=False)
