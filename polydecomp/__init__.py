"""
Polydecomp

Triangulation, trapezoidalization and monotone partition of simple polygons.
"""
