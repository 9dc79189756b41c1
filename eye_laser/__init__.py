"""
Eye Laser: a camera game that fires lasers from your eyes at incoming asteroids.
"""
__version__ = "0.1.0"
