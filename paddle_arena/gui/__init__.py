"""
PyGame front end of Paddle Arena
"""
