"""
Command-line front end and text rendering for the BigInteger engine.

Использует core только через публичные операции.
"""
