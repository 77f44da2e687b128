"""Rendering subpackage.

Turns a :class:`grid_maze.layout.WallLayout` into a flat Pillow image: borders
and walls as filled rectangles, the goal as a square and the ball as a circle.
The palette is fixed per renderer instance; there is no animation.

See :mod:`grid_maze.renderer.image` for the drawing routines.
"""
