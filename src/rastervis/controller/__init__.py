"""
The CONTROLLER layer drives the model in response to UI commands.
It owns the active rasterization source and talks to the view via Qt signals.
"""
