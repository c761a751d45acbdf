"""Language detection pipeline.

This package turns raw text into an English / non-English verdict.
It combines preprocessing, dictionary lookup, and n-gram fallback.
"""
