"""
The MODEL layer contains pure data structures and the physical model.
It has NO knowledge of interpolation or root finding.
It deals with the calibration data and the chord/arc lens geometry.
"""
