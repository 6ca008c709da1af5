"""
Integration Tests Package

End-to-end capture -> seal -> replay/translate passes driven by
sample producers.

TEST AXIOMS:
=============
1. Round trip: values come back in call order, with their types
2. Non-corruption: failed reads never move the cursor
3. Explicit failure: no silent continuation past a fault
"""
