# ClassicVault Test Suite
"""
Test suite including:
- Unit tests per component
- Integration tests
- Security tests (invalid inputs)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
