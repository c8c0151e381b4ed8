# TriviumVault Test Suite
"""
Test suite including:
- Unit tests for the cipher components
- Cross-checks between the two register representations
- CLI and file streaming tests
- Security tests (invalid inputs, edge cases)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
