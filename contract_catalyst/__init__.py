"""
Contract Catalyst — adjusted monthly value of a contract, in figures and in words.

Architecture: Validate → Calculate → Render (figures + words, read back)
Philosophy:  Report every input problem at once. Never hand out words that
             don't match the number.
"""

__version__ = "1.0.0"
