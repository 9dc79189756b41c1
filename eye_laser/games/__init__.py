"""
Game implementations based on the PoseFramework.

The game classes pull in the camera and model stack. Import them from their
own modules, e.g. eye_laser.games.asteroid_game.
"""
