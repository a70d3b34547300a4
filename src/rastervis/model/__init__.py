"""
The MODEL layer contains pure data structures and logic.
It has NO knowledge of the GUI (Qt).
It deals with coordinates, inputs and the rasterization sources.
"""
