"""
The MODEL layer contains pure data structures and numerics.
It has NO knowledge of the GUI (Qt) or the plotting backend (pyqtgraph).
It deals with the waves, their sampling and the axis scaling.
"""
