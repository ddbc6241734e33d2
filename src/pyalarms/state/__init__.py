"""State/store layer.

This package owns the single live alarm aggregate: how one cycle's facts are
folded into it and when a new aggregate replaces the published one.
"""
