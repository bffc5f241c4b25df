"""
Numeric helpers behind the polygon model: planar and geodesic measurement,
polygon engines and coordinate text.
"""
