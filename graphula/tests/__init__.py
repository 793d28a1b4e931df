"""
Test suite for graphula.

Focus areas:
- Dependency injection law
- Effect sequencing and bounded insert retries
- Logged runs and failure dumps
- Replay determinism
"""
