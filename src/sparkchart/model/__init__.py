"""
The MODEL layer contains pure data structures and geometry helpers.
It has NO knowledge of the drawing surface (Qt or matplotlib).
It deals with points, segments, fills and the vector algebra used for transitions.
"""
