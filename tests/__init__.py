"""
Test suite for Healthbook.

Contains unit and integration tests for authentication, the access gate and
appointment management. Test environment setup lives in conftest.py.
"""
