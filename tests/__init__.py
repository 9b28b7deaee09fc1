"""
Unit Tests for chesscore

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_rules.py

    # Run with coverage
    pytest tests/ --cov=chesscore --cov-report=html

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
    - chess (python-chess): Reference move generator for cross-checks
"""
