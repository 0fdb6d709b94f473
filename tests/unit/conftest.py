"""
Unit test fixtures. Use mocks for the LLM; services run against the in-memory DB
from the root conftest.
"""
