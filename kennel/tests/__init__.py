"""Test suite for Kennel.

Organized into three categories:

1. core/: Unit tests for the Dog model and port contract
   - No external dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for output adapter implementations

3. fakes/: Port implementations for testing
   - FakeOutputPort captures written lines for assertions
"""
